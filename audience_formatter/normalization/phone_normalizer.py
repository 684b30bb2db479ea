"""Phone number normalizer.

Keeps only the digits of the raw value and prefixes them with the
country's dialling code from the phone-prefix table.  No attempt is made
to detect a prefix that is already present, so normalizing an already
normalized number prepends the code a second time.

Safety rule: raw values are never logged.
"""
from __future__ import annotations

import logging
import re

from audience_formatter.tables.registry import TableRegistry

logger = logging.getLogger(__name__)

_NON_DIGIT_RE = re.compile(r"\D")


def normalize_phone(raw: str | None, tables: TableRegistry, country: str) -> str:
    """Return the digits of *raw* prefixed with *country*'s dialling code.

    Parameters
    ----------
    raw:
        Phone number in any formatting.
    tables:
        Registry providing ``phone_prefix_map``.
    country:
        Country code looked up case-insensitively (``"us"``, ``"GB"`` …).
        Country names are not resolved here.

    Returns
    -------
    str
        ``""`` for empty input, otherwise ``prefix + digits``.

    Raises
    ------
    InvalidCountryCode
        If *country* has no entry in the phone-prefix table.
    """
    if not raw:
        return ""

    prefix = tables.phone_prefix(country)
    digits = _NON_DIGIT_RE.sub("", raw)
    if not digits:
        logger.debug("normalize_phone: no digits in input (length=%d)", len(raw))
    return prefix + digits
