"""
Ranking engine.

`build_table` is the one primitive: score every record, sort, cap and
drop near-zero values. The standings views (overall, per category,
per language) are built on top of it.
"""

import math
from collections.abc import Callable, Iterable
from numbers import Real
from typing import Optional

import structlog

from tadoku_stats.core.errors import RankingError
from tadoku_stats.core.lookups import language_name, language_sort_key
from tadoku_stats.core.models import (
    OVERALL_SERIES,
    PRESENCE_THRESHOLD,
    RankEntry,
    RankTable,
    TableKind,
    UserRecord,
)

logger = structlog.get_logger(__name__)


Metric = Callable[[UserRecord], float]

CATEGORY_CAP = 3
LANGUAGE_CAP = 10

OVERALL_TITLE = "Overall"


def _score(record: UserRecord, metric: Metric) -> float:
    value = metric(record)
    if isinstance(value, bool) or not isinstance(value, Real):
        raise RankingError(f"Metric for {record.name!r} is not a number: {value!r}")
    value = float(value)
    if math.isnan(value):
        raise RankingError(f"Metric for {record.name!r} is NaN")
    return value


def build_table(
    records: Iterable[UserRecord],
    metric: Metric,
    cap: int = 0,
    title: str = "",
    kind: TableKind = TableKind.OVERALL,
    key: Optional[str] = None,
) -> RankTable:
    """
    Rank records by a metric.

    Sorting is descending and stable, so equal values keep input order.
    The cap is applied before values below the presence threshold are
    dropped, so a capped table can come out shorter than the cap.

    Args:
        records: Records to rank
        metric: Function giving each record's value
        cap: Keep at most this many entries (0 = no limit)
        title: Table title
        kind: Which view the table belongs to
        key: Category label or language code the table ranks

    Returns:
        RankTable in display order

    Raises:
        RankingError: If a metric value is not a comparable number
    """
    scored = [RankEntry(r.name, _score(r, metric)) for r in records]
    scored.sort(key=lambda e: e.value, reverse=True)

    if cap:
        scored = scored[:cap]

    entries = [e for e in scored if e.value >= PRESENCE_THRESHOLD]

    logger.debug("table_built", title=title, entries=len(entries), cap=cap)
    return RankTable(title=title, kind=kind, key=key, entries=entries)


def overall_table(records: list[UserRecord]) -> RankTable:
    """Standings by the contest's total score, uncapped."""
    return build_table(
        records,
        lambda r: r.total_points,
        title=OVERALL_TITLE,
        kind=TableKind.OVERALL,
    )


def category_labels(records: list[UserRecord]) -> list[str]:
    """Every category seen in any record, in first-seen order."""
    labels: dict[str, None] = {}
    for record in records:
        for label in record.category_counts:
            labels.setdefault(label, None)
    return list(labels)


def category_tables(records: list[UserRecord]) -> list[RankTable]:
    """Top three per category by raw count."""
    return [
        build_table(
            records,
            lambda r, label=label: r.count_for(label),
            cap=CATEGORY_CAP,
            title=label,
            kind=TableKind.CATEGORY,
            key=label,
        )
        for label in category_labels(records)
    ]


def language_codes(records: list[UserRecord]) -> list[str]:
    """Every non-Overall series key, in presentation order."""
    codes = {
        key
        for record in records
        for key in record.series_totals
        if key != OVERALL_SERIES
    }
    return sorted(codes, key=language_sort_key)


def language_tables(records: list[UserRecord]) -> list[RankTable]:
    """Top ten per language by summed daily points."""
    return [
        build_table(
            records,
            lambda r, code=code: r.series_sum(code),
            cap=LANGUAGE_CAP,
            title=language_name(code),
            kind=TableKind.LANGUAGE,
            key=code,
        )
        for code in language_codes(records)
    ]


def build_report_tables(records: list[UserRecord]) -> list[RankTable]:
    """
    All standings for a report: overall, then categories, then languages.

    Tables left empty after filtering are dropped.
    """
    tables = [overall_table(records)]
    tables.extend(category_tables(records))
    tables.extend(language_tables(records))

    kept = [t for t in tables if not t.is_empty]
    logger.info(
        "standings_built",
        records=len(records),
        tables=len(kept),
        dropped_empty=len(tables) - len(kept),
    )
    return kept
