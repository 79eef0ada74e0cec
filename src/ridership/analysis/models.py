"""Data models for passenger ridership analysis."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

RECORD_COLUMNS = [
    "start_date",
    "passenger_count",
    "calendar_week",
    "granularity",
    "monthly_date",
]


@dataclass(frozen=True)
class PassengerRecord:
    """One passenger-count observation (a week, a month, ...)."""

    start_date: Optional[str]
    passenger_count: int
    calendar_week: Optional[int] = None
    # Informational only, e.g. "Woche" or "Monat"
    granularity: Optional[str] = None
    monthly_date: Optional[str] = None

    def __post_init__(self):
        count = self.passenger_count
        if isinstance(count, bool) or not isinstance(count, int):
            raise ValueError(f"Passenger count must be an integer, got {count!r}")
        if count < 0:
            raise ValueError(f"Passenger count must not be negative, got {count}")
        week = self.calendar_week
        if week is not None:
            if isinstance(week, bool) or not isinstance(week, int):
                raise ValueError(f"Calendar week must be an integer, got {week!r}")
            if not 1 <= week <= 53:
                raise ValueError(f"Calendar week out of range (1-53): {week}")

    def __str__(self) -> str:
        parts = [f"{self.start_date or '?'}: {self.passenger_count} passengers"]
        if self.calendar_week is not None:
            parts.append(f"week {self.calendar_week}")
        if self.granularity:
            parts.append(self.granularity)
        if self.monthly_date:
            parts.append(f"month {self.monthly_date}")
        return ", ".join(parts)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "start_date": self.start_date,
            "passenger_count": self.passenger_count,
            "calendar_week": self.calendar_week,
            "granularity": self.granularity,
            "monthly_date": self.monthly_date,
        }


@dataclass(frozen=True)
class AnalysisResult:
    """Min/max/average passenger counts for one period.

    When nothing matched the period all numbers are zero. That is a
    "no data" result, not an error.
    """

    min_passengers: int
    max_passengers: int
    avg_passengers: float
    period: str
    record_count: int = 0

    @classmethod
    def empty(cls, period: str) -> "AnalysisResult":
        """Create the all-zero result for a period without data."""
        return cls(min_passengers=0, max_passengers=0, avg_passengers=0.0, period=period)

    def is_empty(self) -> bool:
        return self.record_count == 0

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "period": self.period,
            "min_passengers": self.min_passengers,
            "max_passengers": self.max_passengers,
            "avg_passengers": self.avg_passengers,
            "record_count": self.record_count,
        }

    def format(self) -> str:
        """Multi-line text block for display (average rounded to two decimals)."""
        return (
            f"Period: {self.period}\n"
            f"Minimum passengers: {self.min_passengers}\n"
            f"Maximum passengers: {self.max_passengers}\n"
            f"Average passengers: {self.avg_passengers:.2f}"
        )

    def __str__(self) -> str:
        return self.format()


@dataclass
class QueryResult:
    """Records matching a period query."""

    records: List[PassengerRecord] = field(default_factory=list)
    period: Optional[str] = None

    def to_dataframe(self):
        """Convert to pandas DataFrame."""
        import pandas as pd

        if not self.records:
            return pd.DataFrame(columns=RECORD_COLUMNS)
        return pd.DataFrame([r.to_dict() for r in self.records], columns=RECORD_COLUMNS)
