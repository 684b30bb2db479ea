"""Country normalizer.

Lowercases, drops every non-letter and looks the result up in the
country-name table.  Unknown names (and values that already are codes)
are returned in their stripped form, so the function is idempotent for
every supported country.
"""
from __future__ import annotations

import re

from audience_formatter.tables.registry import TableRegistry

_NON_ALPHA_RE = re.compile(r"[^a-z]")


def normalize_country(raw: str | None, tables: TableRegistry) -> str:
    if not raw:
        return ""
    stripped = _NON_ALPHA_RE.sub("", raw.lower())
    return tables.country_map.get(stripped) or stripped
