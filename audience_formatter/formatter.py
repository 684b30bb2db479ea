"""Formatter: per-field normalizers bound to one frozen table registry.

A ``Formatter`` is built once (defaults plus optional overrides) and is
then safe to share; every method is a pure function of its arguments and
the registry.

Record orchestration
--------------------
``format_record`` resolves the country first (it is required), then
normalizes every other field that is present.  The phone normalizer
receives the resolved country.  The address and state normalizers are
called with their own ``"us"`` default unless the formatter was built
with ``thread_country=True``, in which case they receive the resolved
country as well.

``format_records`` is fail-fast: the first failing record's error
propagates unchanged and no partial result is returned.

Safety rule: raw values are never logged.
"""
from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping

from pydantic import ValidationError

from audience_formatter.core.errors import InvalidRecordType, MissingCountry
from audience_formatter.normalization import (
    normalize_address,
    normalize_city,
    normalize_country,
    normalize_email,
    normalize_name,
    normalize_phone,
    normalize_postal,
    normalize_state,
)
from audience_formatter.records import CanonicalRecord, RawRecord
from audience_formatter.tables.defaults import DEFAULT_TABLES
from audience_formatter.tables.registry import TableRegistry, build

logger = logging.getLogger(__name__)

_FALLBACK_COUNTRY = "us"


class Formatter:
    """Normalizes PII fields for hashed audience matching."""

    def __init__(
        self,
        custom_tables: Mapping[str, object] | None = None,
        *,
        thread_country: bool = False,
    ) -> None:
        self.tables: TableRegistry = build(DEFAULT_TABLES, custom_tables)
        self.thread_country = thread_country

    @classmethod
    def default(cls) -> Formatter:
        """Return a formatter configured from ``Settings``.

        Table overrides are read from ``FORMATTER_TABLES_PATH`` when set.
        """
        from audience_formatter.core.settings import get_settings
        from audience_formatter.tables.loader import load_tables

        settings = get_settings()
        overrides = load_tables(settings.tables_path) if settings.tables_path else None
        return cls(overrides, thread_country=settings.thread_country)

    # ------------------------------------------------------------------
    # Field normalizers
    # ------------------------------------------------------------------

    def format_phone(self, phone: str | None, country: str) -> str:
        return normalize_phone(phone, self.tables, country)

    def format_address(self, address: str | None, country: str = "us") -> str:
        return normalize_address(address, self.tables, country)

    def format_country(self, country: str | None) -> str:
        return normalize_country(country, self.tables)

    def format_name(self, name: str | None) -> str:
        return normalize_name(name)

    def format_email(self, email: str | None) -> str:
        return normalize_email(email)

    def format_city(self, city: str | None) -> str:
        return normalize_city(city)

    def format_state(self, state: str | None, country: str = "us") -> str:
        return normalize_state(state, self.tables, country)

    def format_postal(self, postal: str | None) -> str:
        return normalize_postal(postal)

    # ------------------------------------------------------------------
    # Records
    # ------------------------------------------------------------------

    def format_record(self, record: RawRecord | Mapping[str, object] | None) -> CanonicalRecord:
        """Return the canonical form of *record*.

        ``None`` yields an empty ``CanonicalRecord``.

        Raises
        ------
        InvalidRecordType
            If *record* is not a mapping or ``RawRecord``, or one of its
            fields is not a string or number.
        MissingCountry
            If the ``country`` field is absent or empty.
        InvalidCountryCode
            If a phone is present and the resolved country has no prefix.
        """
        if record is None:
            return CanonicalRecord()

        raw = self._coerce(record)
        if not raw.country:
            raise MissingCountry()

        country = self.format_country(raw.country)
        region = country or _FALLBACK_COUNTRY
        # Address and state keep their own default unless threading is on.
        location_country = region if self.thread_country else _FALLBACK_COUNTRY

        return CanonicalRecord(
            phone=self.format_phone(raw.phone, region) if raw.phone else "",
            address=self.format_address(raw.address, location_country) if raw.address else "",
            first_name=self.format_name(raw.first_name) if raw.first_name else "",
            last_name=self.format_name(raw.last_name) if raw.last_name else "",
            email=self.format_email(raw.email) if raw.email else "",
            city=self.format_city(raw.city) if raw.city else "",
            state=self.format_state(raw.state, location_country) if raw.state else "",
            postal=self.format_postal(raw.postal) if raw.postal else "",
            country=country,
        )

    def format_records(
        self, records: Iterable[RawRecord | Mapping[str, object] | None]
    ) -> list[CanonicalRecord]:
        """Format *records* in order, stopping at the first failure."""
        results: list[CanonicalRecord] = []
        for index, record in enumerate(records):
            try:
                results.append(self.format_record(record))
            except Exception as exc:
                logger.warning(
                    "format_records: record %d failed (%s)", index, type(exc).__name__
                )
                raise
        return results

    @staticmethod
    def _coerce(record: object) -> RawRecord:
        if isinstance(record, RawRecord):
            return record
        if not isinstance(record, Mapping):
            raise InvalidRecordType(record)
        try:
            return RawRecord.model_validate(dict(record))
        except ValidationError as exc:
            # SAFETY: the validation message may echo raw values
            logger.debug("format_record: %d invalid field(s)", exc.error_count())
            raise InvalidRecordType(
                record, "Record fields must be strings or numbers"
            ) from None
