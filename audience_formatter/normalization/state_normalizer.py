"""State / province normalizer.

Rules applied in order
----------------------
1. Lowercase.
2. Resolve *country* to a code through the country table (unknown values
   are used lowercased as-is).
3. Rewrite whole-word region names with the country's state table
   ("new york" -> "ny").  There is no ``default`` layer: a country with
   no table is left unchanged by this step.
4. Fold diacritics.
5. Drop everything but ASCII letters and digits (spaces included).
"""
from __future__ import annotations

import re

from audience_formatter.normalization.rules import replace_chars, replace_words
from audience_formatter.tables.registry import TableRegistry

_NON_ALNUM_RE = re.compile(r"[^a-z0-9]")


def normalize_state(raw: str | None, tables: TableRegistry, country: str = "us") -> str:
    if not raw:
        return ""

    formatted = raw.lower()
    country_code = tables.resolve_country(country)

    formatted = replace_words(formatted, tables.state_map(country_code))
    formatted = replace_chars(formatted, tables.special_character_map)

    return _NON_ALNUM_RE.sub("", formatted).strip()
