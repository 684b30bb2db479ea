"""Postal code normalizer.

Lowercases, strips everything but ASCII letters and digits, then keeps
at most the first five characters ("12345-6789" -> "12345",
"K1A 0B1" -> "k1a0b").  There is no per-country postal logic.
"""
from __future__ import annotations

import re

_NON_ALNUM_RE = re.compile(r"[^a-z0-9]")

MAX_POSTAL_LENGTH = 5


def normalize_postal(raw: str | None) -> str:
    if not raw:
        return ""
    formatted = _NON_ALNUM_RE.sub("", raw.lower()).strip()
    return formatted[:MAX_POSTAL_LENGTH]
