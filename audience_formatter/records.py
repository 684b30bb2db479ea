"""Record models.

``RawRecord`` is the structured input of ``Formatter.format_record``:
every field is optional and loosely typed (numbers are accepted and
turned into strings, unknown keys are ignored).  Both ``first_name`` and
the wire spelling ``firstName`` are accepted.

``CanonicalRecord`` is the normalized output.  Every field is a string;
absent input fields come back as ``""``.
"""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

RECORD_FIELDS: tuple[str, ...] = (
    "phone",
    "address",
    "country",
    "first_name",
    "last_name",
    "email",
    "city",
    "state",
    "postal",
)


class RawRecord(BaseModel):
    model_config = ConfigDict(
        populate_by_name=True,
        coerce_numbers_to_str=True,
        extra="ignore",
        frozen=True,
    )

    phone: str | None = None
    address: str | None = None
    country: str | None = None
    first_name: str | None = Field(default=None, alias="firstName")
    last_name: str | None = Field(default=None, alias="lastName")
    email: str | None = None
    city: str | None = None
    state: str | None = None
    postal: str | None = None


class CanonicalRecord(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    phone: str = ""
    address: str = ""
    country: str = ""
    first_name: str = Field(default="", alias="firstName")
    last_name: str = Field(default="", alias="lastName")
    email: str = ""
    city: str = ""
    state: str = ""
    postal: str = ""

    def as_dict(self) -> dict[str, str]:
        """Return the record keyed by wire names (``firstName``, ``lastName`` …)."""
        return self.model_dump(by_alias=True)

    def is_empty(self) -> bool:
        return not any(getattr(self, name) for name in RECORD_FIELDS)
