"""
Data models for the stats pipeline.

UserRecord is the canonical per-participant record; RankTable is the
only thing the ranking engine hands to the renderer.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from .errors import StatsError


# Values below this are treated as absent (float noise, empty categories)
PRESENCE_THRESHOLD = 0.01

# Key of the series every profile carries
OVERALL_SERIES = "Overall"


class TableKind(str, Enum):
    """Which standings view a table belongs to."""
    OVERALL = "overall"
    CATEGORY = "category"
    LANGUAGE = "language"


@dataclass(frozen=True)
class UserRecord:
    """
    One participant's statistics, as extracted from their profile page.

    Never mutated after construction.
    """

    name: str
    category_counts: dict[str, float]
    series_totals: dict[str, list[float]]
    total_points: float

    def count_for(self, category: str) -> float:
        """Raw count for a category, 0 if the user has none."""
        return self.category_counts.get(category, 0.0)

    def series_sum(self, key: str) -> float:
        """Sum of a series' daily increments, 0 if the series is absent."""
        return sum(self.series_totals.get(key, []))

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "name": self.name,
            "categoryCounts": {k: float(v) for k, v in self.category_counts.items()},
            "seriesTotals": {
                k: [float(x) for x in v] for k, v in self.series_totals.items()
            },
            "totalPoints": float(self.total_points),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "UserRecord":
        """
        Create from dictionary (e.g., loaded from JSON).

        Raises:
            StatsError: If fields are missing or mistyped, there are no
                category counts, or the Overall series is absent
        """
        try:
            record = cls(
                name=str(data["name"]),
                category_counts={
                    str(k): float(v) for k, v in data["categoryCounts"].items()
                },
                series_totals={
                    str(k): [float(x) for x in v]
                    for k, v in data["seriesTotals"].items()
                },
                total_points=float(data["totalPoints"]),
            )
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            raise StatsError(f"Malformed user record: {e!r}") from e

        if not record.category_counts:
            raise StatsError(f"Malformed user record {record.name!r}: no category counts")
        if OVERALL_SERIES not in record.series_totals:
            raise StatsError(
                f"Malformed user record {record.name!r}: no {OVERALL_SERIES!r} series"
            )
        return record


@dataclass(frozen=True)
class RankEntry:
    """A single (participant, value) row of a standings table."""
    name: str
    value: float


@dataclass
class RankTable:
    """
    Sorted, capped and filtered standings for one metric.

    Entries are in final display order; rank is position + 1.
    """

    title: str
    kind: TableKind = TableKind.OVERALL
    key: Optional[str] = None  # category label or language code
    entries: list[RankEntry] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self):
        return iter(self.entries)

    @property
    def is_empty(self) -> bool:
        return not self.entries

    def names(self) -> list[str]:
        return [e.name for e in self.entries]
