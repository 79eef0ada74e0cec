"""Statistics computation for passenger records."""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable

import pandas as pd

from ridership.analysis.models import PassengerRecord


@dataclass
class PassengerStats:
    """Container for passenger statistics."""

    record_count: int = 0
    total_passengers: int = 0
    min_passengers: int = 0
    max_passengers: int = 0
    avg_passengers: float = 0.0
    by_granularity: Dict[str, int] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "record_count": self.record_count,
            "total_passengers": self.total_passengers,
            "min_passengers": self.min_passengers,
            "max_passengers": self.max_passengers,
            "avg_passengers": self.avg_passengers,
            "by_granularity": self.by_granularity,
        }

    def granularity_dataframe(self) -> pd.DataFrame:
        """Return by_granularity as DataFrame."""
        if not self.by_granularity:
            return pd.DataFrame(columns=["granularity", "count"])
        return pd.DataFrame(
            [{"granularity": k, "count": v} for k, v in sorted(self.by_granularity.items())]
        )


def compute_stats(records: Iterable[PassengerRecord]) -> PassengerStats:
    """Compute statistics from passenger records. No records gives all zeros."""
    stats = PassengerStats()

    for r in records:
        count = r.passenger_count
        if stats.record_count == 0:
            stats.min_passengers = stats.max_passengers = count
        else:
            stats.min_passengers = min(stats.min_passengers, count)
            stats.max_passengers = max(stats.max_passengers, count)
        stats.record_count += 1
        stats.total_passengers += count

        label = (r.granularity or "Unknown").strip() or "Unknown"
        stats.by_granularity[label] = stats.by_granularity.get(label, 0) + 1

    if stats.record_count:
        stats.avg_passengers = stats.total_passengers / stats.record_count
    return stats
