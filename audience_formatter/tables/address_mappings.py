"""Address-word canonicalization tables, keyed by country code.

The ``default`` table is applied to every address after the
country-specific one, so a country table only needs the words whose
canonical form differs from (or is missing in) the default.

Keys are matched after diacritic folding and delimiter substitution, so
"straße" is listed as "strasse" and no key contains punctuation.
"""
from __future__ import annotations

DEFAULT_ADDRESS: dict[str, str] = {
    "alley": "aly",
    "apartment": "apt",
    "avenue": "ave",
    "boulevard": "blvd",
    "building": "bldg",
    "circle": "cir",
    "court": "ct",
    "crescent": "cres",
    "department": "dept",
    "drive": "dr",
    "expressway": "expy",
    "floor": "fl",
    "freeway": "fwy",
    "highway": "hwy",
    "lane": "ln",
    "parkway": "pkwy",
    "place": "pl",
    "plaza": "plz",
    "road": "rd",
    "room": "rm",
    "square": "sq",
    "street": "st",
    "suite": "ste",
    "terrace": "ter",
}

US_ADDRESS: dict[str, str] = {
    "avenue": "ave",
    "causeway": "cswy",
    "center": "ctr",
    "centre": "ctr",
    "crossing": "xing",
    "heights": "hts",
    "junction": "jct",
    "mount": "mt",
    "mountain": "mtn",
    "point": "pt",
    "post office box": "po box",
    "route": "rte",
    "trail": "trl",
    "turnpike": "tpke",
}

CA_ADDRESS: dict[str, str] = {
    "centre": "ctr",
    "concession": "conc",
    "crescent": "cres",
    "route rurale": "rr",
    "rural route": "rr",
    "boulevard": "blvd",
    "chemin": "ch",
}

GB_ADDRESS: dict[str, str] = {
    "close": "cl",
    "crescent": "cres",
    "gardens": "gdns",
    "grove": "gr",
    "parade": "pde",
    "terrace": "ter",
    "walk": "wlk",
}

AU_ADDRESS: dict[str, str] = {
    "close": "cl",
    "esplanade": "esp",
    "grove": "gr",
    "parade": "pde",
    "highway": "hwy",
}

DE_ADDRESS: dict[str, str] = {
    "strasse": "str",
    "platz": "pl",
    "allee": "al",
    "weg": "wg",
    "nummer": "number",
    "nr": "number",
}

FR_ADDRESS: dict[str, str] = {
    "avenue": "av",
    "boulevard": "bd",
    "chemin": "ch",
    "impasse": "imp",
    "place": "pl",
    "route": "rte",
    "allee": "all",
    "allée": "all",
}

ES_ADDRESS: dict[str, str] = {
    "avenida": "av",
    "calle": "c",
    "carretera": "ctra",
    "paseo": "po",
    "plaza": "pl",
    "piso": "p",
}

IT_ADDRESS: dict[str, str] = {
    "corso": "cso",
    "piazza": "pza",
    "viale": "vle",
    "vicolo": "vlo",
}

NL_ADDRESS: dict[str, str] = {
    "gracht": "gr",
    "laan": "ln",
    "plein": "pln",
    "straat": "str",
}

MX_ADDRESS: dict[str, str] = {
    "avenida": "av",
    "calle": "c",
    "carretera": "carr",
    "colonia": "col",
    "privada": "priv",
}

IN_ADDRESS: dict[str, str] = {
    "marg": "mg",
    "nagar": "ngr",
    "near": "nr",
    "opposite": "opp",
}

ADDRESS_MAPPINGS: dict[str, dict[str, str]] = {
    "default": DEFAULT_ADDRESS,
    "us": US_ADDRESS,
    "ca": CA_ADDRESS,
    "gb": GB_ADDRESS,
    "au": AU_ADDRESS,
    "de": DE_ADDRESS,
    "fr": FR_ADDRESS,
    "es": ES_ADDRESS,
    "it": IT_ADDRESS,
    "nl": NL_ADDRESS,
    "mx": MX_ADDRESS,
    "in": IN_ADDRESS,
}
