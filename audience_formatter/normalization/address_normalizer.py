"""Address normalizer.

Rewrites a free-form street address into the canonical lowercase form
used for audience matching (``"123 Main St. Apt #5"`` ->
``"123 main st apt number 5"``).

Rules applied in order
----------------------
1. Lowercase.
2. Resolve *country* to a code through the country table (unknown values
   are used lowercased as-is).
3. Fold diacritics (plain character substitution: ß -> ss, ä -> ae …).
4. Replace delimiters (plain character substitution; ``#`` becomes the
   word "number").
5. Abbreviate direction words (whole words only).
6. Canonicalize number words (whole words only).
7. Apply the country's address-word table (whole words only).
8. Apply the ``default`` address-word table (whole words only).
9. Drop everything but ASCII letters, digits and whitespace.
10. Collapse whitespace runs and trim.

The order is load-bearing: word rules must run before step 9 removes the
characters they match on, and delimiters must be turned into spaces
before word boundaries can be found around them.

Safety rule: raw values are never logged.
"""
from __future__ import annotations

import re
from typing import Callable

from audience_formatter.normalization.rules import replace_chars, replace_words
from audience_formatter.tables.registry import TableRegistry

_DISALLOWED_RE = re.compile(r"[^a-z0-9\s]")
_WHITESPACE_RE = re.compile(r"\s+")

# ---------------------------------------------------------------------------
# Pipeline stages
# ---------------------------------------------------------------------------

# Each stage: (text, tables, country_code) -> text


def fold_diacritics(text: str, tables: TableRegistry, country_code: str) -> str:
    return replace_chars(text, tables.special_character_map)


def replace_delimiters(text: str, tables: TableRegistry, country_code: str) -> str:
    return replace_chars(text, tables.delimiter_map)


def abbreviate_directions(text: str, tables: TableRegistry, country_code: str) -> str:
    return replace_words(text, tables.direction_map)


def canonicalize_numbers(text: str, tables: TableRegistry, country_code: str) -> str:
    return replace_words(text, tables.number_map)


def apply_country_words(text: str, tables: TableRegistry, country_code: str) -> str:
    return replace_words(text, tables.address_map(country_code))


def apply_default_words(text: str, tables: TableRegistry, country_code: str) -> str:
    return replace_words(text, tables.default_address_map)


def strip_disallowed(text: str, tables: TableRegistry, country_code: str) -> str:
    return _DISALLOWED_RE.sub("", text)


def collapse_whitespace(text: str, tables: TableRegistry, country_code: str) -> str:
    return _WHITESPACE_RE.sub(" ", text.strip())


ADDRESS_STAGES: tuple[Callable[[str, TableRegistry, str], str], ...] = (
    fold_diacritics,
    replace_delimiters,
    abbreviate_directions,
    canonicalize_numbers,
    apply_country_words,
    apply_default_words,
    strip_disallowed,
    collapse_whitespace,
)

# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def normalize_address(raw: str | None, tables: TableRegistry, country: str = "us") -> str:
    """Return *raw* address in canonical form.

    Parameters
    ----------
    raw:
        Street address as entered by the customer.
    tables:
        Registry providing the character, word and address tables.
    country:
        Country name or code selecting the country-specific word table.
        Defaults to ``"us"``.

    Returns
    -------
    str
        Canonical address, or ``""`` for empty input.  Never raises.
    """
    if not raw:
        return ""

    formatted = raw.lower()
    country_code = tables.resolve_country(country)

    for stage in ADDRESS_STAGES:
        formatted = stage(formatted, tables, country_code)
    return formatted
