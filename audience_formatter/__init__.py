"""Canonical PII formatting for hashed audience matching."""
from audience_formatter.core.errors import (
    FormatterError,
    InvalidCountryCode,
    InvalidRecordType,
    MissingCountry,
    TableConfigError,
)
from audience_formatter.formatter import Formatter
from audience_formatter.records import CanonicalRecord, RawRecord

__all__ = [
    "CanonicalRecord",
    "Formatter",
    "FormatterError",
    "InvalidCountryCode",
    "InvalidRecordType",
    "MissingCountry",
    "RawRecord",
    "TableConfigError",
]
