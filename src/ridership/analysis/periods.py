"""Period queries: classify a period string and test records against it.

Accepted shapes, checked in this order:

    YYYY        year      (e.g. 2020)
    YYYY-QN     quarter   (e.g. 2020-Q1)
    YYYY-MM     month     (e.g. 2020-02)
    YYYY-WNN    week      (e.g. 2020-W06)
"""

import logging
import re
from dataclasses import dataclass
from datetime import date, datetime
from typing import Literal, Optional, Union

from ridership.analysis.errors import DateParseError
from ridership.analysis.models import PassengerRecord

logger = logging.getLogger(__name__)

PeriodKind = Literal["year", "quarter", "month", "week", "invalid"]

_YEAR_RE = re.compile(r"(\d{4})", re.ASCII)
_QUARTER_RE = re.compile(r"(\d{4})-Q([1-4])", re.ASCII)
_MONTH_RE = re.compile(r"(\d{4})-(\d{2})", re.ASCII)
_WEEK_RE = re.compile(r"(\d{4})-W(\d{2})", re.ASCII)
_DATE_RE = re.compile(r"\d{4}-\d{2}-\d{2}", re.ASCII)
_PATTERNS = [
    ("year", _YEAR_RE),
    ("quarter", _QUARTER_RE),
    ("month", _MONTH_RE),
    ("week", _WEEK_RE),
]

# Stricter shapes for user input: months 01-12, weeks 01-53
_VALID_INPUT_RE = re.compile(
    r"(\d{4}"
    r"|\d{4}-Q[1-4]"
    r"|\d{4}-(0[1-9]|1[0-2])"
    r"|\d{4}-W(0[1-9]|[1-4]\d|5[0-3]))",
    re.ASCII,
)

PERIOD_FORMATS = [
    "YYYY (e.g. 2020)",
    "YYYY-QN (e.g. 2020-Q1)",
    "YYYY-MM (e.g. 2020-02)",
    "YYYY-WNN (e.g. 2020-W06)",
]


@dataclass(frozen=True)
class Period:
    """A classified period query."""

    kind: PeriodKind
    text: str
    year: Optional[int] = None
    # Quarter, month or week number depending on kind
    number: Optional[int] = None

    def __str__(self) -> str:
        return self.text


def parse_period(text: str) -> Period:
    """Classify a period string. Unknown shapes yield kind "invalid"."""
    for kind, pattern in _PATTERNS:
        m = pattern.fullmatch(text)
        if not m:
            continue
        groups = m.groups()
        number = int(groups[1]) if len(groups) > 1 else None
        return Period(kind=kind, text=text, year=int(groups[0]), number=number)
    return Period(kind="invalid", text=text)


def is_valid_period(text: str) -> bool:
    """Check user input against the accepted period formats."""
    return bool(_VALID_INPUT_RE.fullmatch(text))


def quarter_of(month: int) -> int:
    """Quarter (1-4) of a month (1-12)."""
    return (month - 1) // 3 + 1


def parse_record_date(record: PassengerRecord) -> date:
    """Parse a record's start date (YYYY-MM-DD)."""
    if record.start_date is None:
        raise DateParseError("Record has no start date")
    if not _DATE_RE.fullmatch(record.start_date):
        raise DateParseError(f"Invalid date: {record.start_date}", record.start_date)
    try:
        return datetime.strptime(record.start_date, "%Y-%m-%d").date()
    except ValueError as e:
        raise DateParseError(f"Invalid date: {record.start_date}", record.start_date) from e


def matches_period(record: PassengerRecord, period: Union[Period, str]) -> bool:
    """Check if a record falls inside the period.

    Records without a parseable start date never match.
    """
    if isinstance(period, str):
        period = parse_period(period)
    if period.kind == "invalid":
        return False

    try:
        d = parse_record_date(record)
    except DateParseError as e:
        logger.warning("%s", e)
        return False

    if period.kind == "year":
        return d.year == period.year
    if period.kind == "quarter":
        return d.year == period.year and quarter_of(d.month) == period.number
    if period.kind == "month":
        return record.start_date.startswith(period.text) or (
            record.monthly_date is not None and record.monthly_date.startswith(period.text)
        )
    if period.kind == "week":
        return (
            record.start_date.startswith(period.text[:4])
            and record.calendar_week is not None
            and record.calendar_week == period.number
        )
    return False
