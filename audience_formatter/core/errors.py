"""Exception taxonomy for the formatter.

Only three conditions are fatal to a formatting call:

InvalidCountryCode : phone-prefix lookup miss
InvalidRecordType  : record input is not a mapping / ``RawRecord``
MissingCountry     : record has no ``country`` value

Every other lookup miss degrades to a minimally normalized value instead
of raising.  ``TableConfigError`` is raised while *loading* table
overrides, never while formatting.
"""
from __future__ import annotations


class FormatterError(ValueError):
    """Base class for all formatter errors."""


class InvalidCountryCode(FormatterError):
    """No phone prefix is registered for the requested country."""

    def __init__(self, country: str) -> None:
        self.country = country
        super().__init__(f"Invalid country code: {country}")


class InvalidRecordType(FormatterError, TypeError):
    """The record passed to ``format_record`` is not structured."""

    def __init__(self, received: object, message: str | None = None) -> None:
        self.received_type = type(received).__name__
        super().__init__(message or f"Record must be a mapping, got {self.received_type}")


class MissingCountry(FormatterError):
    """The record has no usable ``country`` value."""

    def __init__(self) -> None:
        super().__init__("Country is required")


class TableConfigError(FormatterError):
    """A table override file could not be read or has the wrong shape."""
