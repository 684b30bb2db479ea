"""Name and city normalizers.

Both fields use the same rule: lowercase, then keep only ASCII letters
and digits.  Spaces are removed too, so "New York" becomes "newyork" and
"Mary Ann" becomes "maryann".  Non-ASCII letters are dropped, not folded.
"""
from __future__ import annotations

import re

_NON_ALNUM_RE = re.compile(r"[^a-z0-9]")


def _squash(raw: str | None) -> str:
    if not raw:
        return ""
    return _NON_ALNUM_RE.sub("", raw.lower()).strip()


def normalize_name(raw: str | None) -> str:
    """Return *raw* (a first or last name) as a single lowercase token."""
    return _squash(raw)


def normalize_city(raw: str | None) -> str:
    """Return *raw* (a city name) as a single lowercase token."""
    return _squash(raw)
