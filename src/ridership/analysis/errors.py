"""Exceptions raised while loading and analysing passenger data."""

from typing import Any, Optional


class RidershipError(Exception):
    """Base class for ridership analysis errors."""


class FormatError(RidershipError, ValueError):
    """Input is not a JSON array of records. Nothing can be loaded."""


class RecordParseError(RidershipError, ValueError):
    """A single record is missing required fields or has bad values."""

    def __init__(self, message: str, obj: Any = None):
        super().__init__(message)
        self.obj = obj


class DateParseError(RidershipError, ValueError):
    """A record's start date could not be parsed."""

    def __init__(self, message: str, value: Optional[str] = None):
        super().__init__(message)
        self.value = value
