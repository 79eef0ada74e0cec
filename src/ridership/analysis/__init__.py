"""Passenger count analysis by year, quarter, month and week."""

from ridership.analysis.errors import (
    DateParseError,
    FormatError,
    RecordParseError,
    RidershipError,
)
from ridership.analysis.loader import load_records, parse_record
from ridership.analysis.models import AnalysisResult, PassengerRecord, QueryResult
from ridership.analysis.periods import Period, is_valid_period, matches_period, parse_period
from ridership.analysis.service import AnalysisService

__all__ = [
    "AnalysisResult",
    "AnalysisService",
    "DateParseError",
    "FormatError",
    "PassengerRecord",
    "Period",
    "QueryResult",
    "RecordParseError",
    "RidershipError",
    "is_valid_period",
    "load_records",
    "matches_period",
    "parse_period",
    "parse_record",
]
