"""Email normalizer.

Lowercases and keeps only ASCII letters, digits, ``@``, ``.`` and ``-``.
Unlike the address and state normalizers no diacritic folding happens
here: ``"info@bücher.de"`` becomes ``"info@bcher.de"``.  Plus-tags lose
their ``+`` but are otherwise kept; no provider-specific rewriting is
applied.

Safety rule: raw values are never logged.
"""
from __future__ import annotations

import re

_DISALLOWED_RE = re.compile(r"[^a-z0-9@.\-]")


def normalize_email(raw: str | None) -> str:
    """Return *raw* email address in canonical lowercase form."""
    if not raw:
        return ""
    return _DISALLOWED_RE.sub("", raw.lower()).strip()
