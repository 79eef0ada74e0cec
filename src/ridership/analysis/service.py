"""Analysis service - period filtering and aggregation over loaded records."""

from datetime import date
from typing import Iterable, List, Optional, Tuple, Union

from ridership.analysis.errors import DateParseError
from ridership.analysis.models import AnalysisResult, PassengerRecord, QueryResult
from ridership.analysis.periods import Period, matches_period, parse_period, parse_record_date
from ridership.analysis.stats import PassengerStats, compute_stats


class AnalysisService:
    """Answers min/max/average queries over an in-memory record collection.

    The records are never modified, so one service can serve any number of
    queries.
    """

    def __init__(self, records: Iterable[PassengerRecord]):
        self._records = tuple(records)

    @property
    def records(self) -> Tuple[PassengerRecord, ...]:
        return self._records

    @property
    def record_count(self) -> int:
        return len(self._records)

    def query(self, period: Union[Period, str]) -> QueryResult:
        """Return the records falling inside the period."""
        if isinstance(period, str):
            period = parse_period(period)
        matched = [r for r in self._records if matches_period(r, period)]
        return QueryResult(records=matched, period=period.text)

    def analyze(self, period: Union[Period, str]) -> AnalysisResult:
        """Compute min/max/average passengers for the period.

        Returns the all-zero result when no record matches.
        """
        result = self.query(period)
        if not result.records:
            return AnalysisResult.empty(result.period)

        stats = compute_stats(result.records)
        return AnalysisResult(
            min_passengers=stats.min_passengers,
            max_passengers=stats.max_passengers,
            avg_passengers=stats.avg_passengers,
            period=result.period,
            record_count=stats.record_count,
        )

    def statistics(self, records: Optional[List[PassengerRecord]] = None) -> PassengerStats:
        """Compute statistics for the given records (default: all records)."""
        return compute_stats(self._records if records is None else records)

    def coverage(self) -> Optional[Tuple[date, date]]:
        """Earliest and latest parseable start date, or None without any."""
        dates = []
        for r in self._records:
            try:
                dates.append(parse_record_date(r))
            except DateParseError:
                continue
        if not dates:
            return None
        return min(dates), max(dates)
