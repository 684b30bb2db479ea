"""Normalization package.

One normalizer per PII field type.  Each normalizer takes a raw value and
the frozen ``TableRegistry`` and returns the canonical form sent for
hashed audience matching.

All normalizers follow the same contract::

    def normalize_<field>(raw: str | None, tables: TableRegistry[, country]) -> str:
        ...

Empty or ``None`` input always yields ``""``.  Only ``normalize_phone``
raises (``InvalidCountryCode``); every other normalizer degrades to a
minimally normalized value when a table lookup misses.
"""
from audience_formatter.normalization.address_normalizer import normalize_address
from audience_formatter.normalization.country_normalizer import normalize_country
from audience_formatter.normalization.email_normalizer import normalize_email
from audience_formatter.normalization.name_normalizer import normalize_city, normalize_name
from audience_formatter.normalization.phone_normalizer import normalize_phone
from audience_formatter.normalization.postal_normalizer import normalize_postal
from audience_formatter.normalization.state_normalizer import normalize_state

__all__ = [
    "normalize_address",
    "normalize_city",
    "normalize_country",
    "normalize_email",
    "normalize_name",
    "normalize_phone",
    "normalize_postal",
    "normalize_state",
]
