"""Table registry: default tables merged with caller overrides.

The merge is *shallow*: an override for a top-level table replaces the
whole default table, it is never merged entry by entry.  Passing
``{"state_mappings": {"us": {...}}}`` therefore drops every non-US state
table.

The resulting ``TableRegistry`` is frozen.  Every table (and every
per-country sub-table) is wrapped in a read-only mapping proxy so a
registry can be shared between formatters and threads.

Override shape is not validated.  A table that is not a mapping is
treated as empty; a country missing from ``state_mappings`` or
``address_mappings`` yields an empty table.  The only lookup that fails
loudly is the phone prefix (``InvalidCountryCode``).
"""
from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, fields
from types import MappingProxyType

from audience_formatter.core.errors import InvalidCountryCode, TableConfigError
from audience_formatter.tables.defaults import DEFAULT_TABLES

logger = logging.getLogger(__name__)

_EMPTY: Mapping[str, str] = MappingProxyType({})

# camelCase spellings accepted for override keys
_TABLE_ALIASES: dict[str, str] = {
    "phonePrefixMap": "phone_prefix_map",
    "countryMap": "country_map",
    "numberMap": "number_map",
    "directionMap": "direction_map",
    "delimiterMap": "delimiter_map",
    "specialCharacterMap": "special_character_map",
    "stateMappings": "state_mappings",
    "addressMappings": "address_mappings",
}


def _freeze(value: object) -> Mapping:
    if not isinstance(value, Mapping):
        return _EMPTY
    return MappingProxyType(
        {key: _freeze(item) if isinstance(item, Mapping) else item for key, item in value.items()}
    )


def _table(value: object) -> Mapping[str, str]:
    return value if isinstance(value, Mapping) else _EMPTY


@dataclass(frozen=True)
class TableRegistry:
    """Frozen set of lookup tables consumed by the normalizers."""

    phone_prefix_map: Mapping[str, str]
    country_map: Mapping[str, str]
    number_map: Mapping[str, str]
    direction_map: Mapping[str, str]
    delimiter_map: Mapping[str, str]
    special_character_map: Mapping[str, str]
    state_mappings: Mapping[str, Mapping[str, str]]
    address_mappings: Mapping[str, Mapping[str, str]]

    def phone_prefix(self, country: str | None) -> str:
        """Return the dialling prefix for *country* or raise ``InvalidCountryCode``."""
        prefix = self.phone_prefix_map.get((country or "").lower())
        if not prefix:
            raise InvalidCountryCode(country)
        return str(prefix)

    def resolve_country(self, country: str) -> str:
        """Map a lowercased country name to its code, falling back to the name."""
        key = country.lower()
        return self.country_map.get(key) or key

    def state_map(self, country_code: str) -> Mapping[str, str]:
        return _table(self.state_mappings.get(country_code))

    def address_map(self, country_code: str) -> Mapping[str, str]:
        return _table(self.address_mappings.get(country_code))

    @property
    def default_address_map(self) -> Mapping[str, str]:
        return self.address_map("default")


TABLE_NAMES: tuple[str, ...] = tuple(f.name for f in fields(TableRegistry))


def build(
    defaults: Mapping[str, object] = DEFAULT_TABLES,
    overrides: Mapping[str, object] | None = None,
) -> TableRegistry:
    """Return a frozen registry of *defaults* shallow-merged with *overrides*.

    Override keys may use either the snake_case table names or their
    camelCase spelling.  Unknown keys are ignored with a warning.

    Raises
    ------
    TableConfigError
        If *overrides* is given but is not a mapping.
    """
    if overrides is not None and not isinstance(overrides, Mapping):
        raise TableConfigError(
            f"table overrides must be a mapping, got {type(overrides).__name__}"
        )

    merged: dict[str, object] = dict(defaults)
    for key, value in (overrides or {}).items():
        name = _TABLE_ALIASES.get(key, key)
        if name not in TABLE_NAMES:
            logger.warning("build: ignoring unknown table %r", key)
            continue
        merged[name] = value

    for name in TABLE_NAMES:
        if name in merged and not isinstance(merged[name], Mapping):
            logger.warning("build: table %r is not a mapping; treating it as empty", name)

    return TableRegistry(**{name: _freeze(merged.get(name)) for name in TABLE_NAMES})
