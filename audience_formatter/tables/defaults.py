"""Built-in lookup tables.

Every table maps a lowercase lookup key to its replacement.  Tables that
are consulted by whole-word rules are applied one entry at a time in the
order listed here, so compound keys must precede any key they contain.
"""
from __future__ import annotations

import phonenumbers

from audience_formatter.tables.address_mappings import ADDRESS_MAPPINGS
from audience_formatter.tables.state_mappings import STATE_MAPPINGS

# Regions accepted by ``format_phone``.  Dialling codes come from the
# libphonenumber metadata rather than being hard-coded.
SUPPORTED_PHONE_REGIONS: tuple[str, ...] = (
    "us", "ca", "mx", "gb", "fr", "de", "it", "es", "nl", "in",
    "jp", "au", "sa", "ae", "tr", "se", "be", "pl", "sg",
)

PHONE_PREFIX_MAP: dict[str, str] = {
    region: str(phonenumbers.country_code_for_region(region.upper()))
    for region in SUPPORTED_PHONE_REGIONS
}

# Keys are country names lowercased with every non-letter removed.
COUNTRY_MAP: dict[str, str] = {
    "canada": "ca",
    "france": "fr",
    "germany": "de",
    "greatbritain": "gb",
    "unitedkingdom": "gb",
    "italy": "it",
    "spain": "es",
    "unitedstates": "us",
    "unitedstatesofamerica": "us",
    "mexico": "mx",
    "netherlands": "nl",
    "india": "in",
    "japan": "jp",
    "australia": "au",
    "saudiarabia": "sa",
    "unitedarabemirates": "ae",
    "turkey": "tr",
    "sweden": "se",
    "belgium": "be",
    "poland": "pl",
    "singapore": "sg",
}

NUMBER_MAP: dict[str, str] = {
    "número": "number",
    "numero": "number",
    "no": "number",
    "núm": "number",
    "num": "number",
}

DIRECTION_MAP: dict[str, str] = {
    "east": "e",
    "north": "n",
    "south": "s",
    "west": "w",
    "northeast": "ne",
    "northwest": "nw",
    "southeast": "se",
    "southwest": "sw",
}

# Plain character substitutions; "#" becomes a word so it can later be
# matched by the number rule.
DELIMITER_MAP: dict[str, str] = {
    ",": " ",
    ".": " ",
    "[": " ",
    "]": " ",
    "/": " ",
    "-": " ",
    "#": " number ",
}

SPECIAL_CHARACTER_MAP: dict[str, str] = {
    "ß": "ss",
    "ä": "ae",
    "ö": "oe",
    "ü": "ue",
    "ø": "o",
    "æ": "ae",
}

DEFAULT_TABLES: dict[str, object] = {
    "phone_prefix_map": PHONE_PREFIX_MAP,
    "country_map": COUNTRY_MAP,
    "number_map": NUMBER_MAP,
    "direction_map": DIRECTION_MAP,
    "delimiter_map": DELIMITER_MAP,
    "special_character_map": SPECIAL_CHARACTER_MAP,
    "state_mappings": STATE_MAPPINGS,
    "address_mappings": ADDRESS_MAPPINGS,
}
