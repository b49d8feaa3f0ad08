"""Tests for the ranking engine."""

import math

import pytest

from tadoku_stats.core.errors import RankingError
from tadoku_stats.core.models import TableKind
from tadoku_stats.ranking.engine import (
    build_report_tables,
    build_table,
    category_labels,
    category_tables,
    language_codes,
    language_tables,
    overall_table,
)
from tests.conftest import make_record


def totals(*pairs):
    return [make_record(name, total) for name, total in pairs]


def by_total(record):
    return record.total_points


class TestBuildTable:
    """Tests for build_table function."""

    def test_descending(self):
        """Test entries sorted by value, highest first."""
        table = build_table(totals(("a", 1.0), ("b", 3.0), ("c", 2.0)), by_total)

        assert table.names() == ["b", "c", "a"]
        values = [e.value for e in table]
        assert values == sorted(values, reverse=True)

    def test_stable_ties(self):
        """Test equal values keep input order."""
        table = build_table(totals(("a", 2.0), ("b", 5.0), ("c", 2.0), ("d", 2.0)), by_total)
        assert table.names() == ["b", "a", "c", "d"]

    def test_cap(self):
        """Test cap keeps the top entries."""
        table = build_table(totals(("a", 1.0), ("b", 4.0), ("c", 3.0), ("d", 2.0)), by_total, cap=2)
        assert table.names() == ["b", "c"]

    def test_zero_cap_is_unlimited(self):
        """Test cap of 0 keeps everything."""
        table = build_table(totals(*[(str(i), float(i + 1)) for i in range(20)]), by_total)
        assert len(table) == 20

    def test_threshold_after_cap(self):
        """Test near-zero rows are dropped after capping."""
        records = totals(("a", 5.0), ("b", 0.005), ("c", 0.0), ("d", 0.0))
        table = build_table(records, by_total, cap=3)

        assert table.names() == ["a"]

    def test_cap_not_backfilled(self):
        """Test dropped rows are not replaced by rows beyond the cap."""
        records = totals(("a", 5.0), ("b", 4.0), ("c", 0.001))
        table = build_table(records, by_total, cap=2)

        assert table.names() == ["a", "b"]
        assert len(build_table(records + totals(("d", 0.002)), by_total, cap=3)) == 2

    def test_threshold_boundary(self):
        """Test 0.01 itself is kept."""
        table = build_table(totals(("a", 0.01), ("b", 0.0099)), by_total)
        assert table.names() == ["a"]

    def test_no_value_below_threshold(self):
        """Test filtered table never holds tiny values."""
        records = totals(*[(str(i), i / 1000) for i in range(30)])
        table = build_table(records, by_total)

        assert all(e.value >= 0.01 for e in table)

    def test_nan_metric(self):
        """Test NaN cannot be ranked."""
        with pytest.raises(RankingError):
            build_table(totals(("a", 1.0), ("b", math.nan)), by_total)

    def test_non_numeric_metric(self):
        """Test non-number metric fails."""
        with pytest.raises(RankingError):
            build_table(totals(("a", 1.0)), lambda r: "lots")

    def test_empty_input(self):
        """Test no records gives an empty table."""
        assert build_table([], by_total).is_empty

    def test_metadata(self):
        """Test title, kind and key are carried."""
        table = build_table(totals(("a", 1.0)), by_total, title="Book",
                            kind=TableKind.CATEGORY, key="Book")

        assert table.title == "Book"
        assert table.kind == TableKind.CATEGORY
        assert table.key == "Book"


class TestOverallTable:
    """Tests for overall_table function."""

    def test_orders_by_total(self, sample_records):
        """Test overall standings by total points."""
        table = overall_table(sample_records)

        assert table.names() == ["bob", "alice", "carol"]
        assert table.entries[0].value == 300.0

    def test_uncapped(self):
        """Test everyone with points is listed."""
        records = totals(*[(f"r{i}", 10.0 + i) for i in range(15)])
        assert len(overall_table(records)) == 15


class TestCategoryTables:
    """Tests for category views."""

    def test_labels_first_seen(self, sample_records):
        """Test category order follows first appearance."""
        assert category_labels(sample_records) == ["Book", "Manga", "News"]

    def test_one_table_per_category(self, sample_records):
        """Test a table for each category."""
        tables = category_tables(sample_records)

        assert [t.key for t in tables] == ["Book", "Manga", "News"]
        assert all(t.kind == TableKind.CATEGORY for t in tables)

    def test_missing_category_counts_zero(self, sample_records):
        """Test users without a category are filtered out."""
        book, manga, news = category_tables(sample_records)

        assert book.names() == ["alice", "bob"]
        assert manga.names() == ["carol", "alice"]
        assert news.names() == ["bob"]

    def test_capped_at_three(self):
        """Test category tables are top three."""
        records = [make_record(f"r{i}", 1.0, counts={"Book": float(i + 1)}) for i in range(6)]
        (table,) = category_tables(records)

        assert table.names() == ["r5", "r4", "r3"]


class TestLanguageTables:
    """Tests for language views."""

    def test_codes_exclude_overall(self, sample_records):
        """Test Overall is not a language."""
        assert "Overall" not in language_codes(sample_records)

    def test_codes_presentation_order(self, sample_records):
        """Test tables follow preference order."""
        assert language_codes(sample_records) == ["jp", "zh", "fr"]

    def test_sums_series(self, sample_records):
        """Test metric is the summed series."""
        jp = language_tables(sample_records)[0]

        assert jp.title == "Japanese"
        assert jp.key == "jp"
        assert [(e.name, e.value) for e in jp] == [("bob", 150.0), ("alice", 120.5)]

    def test_capped_at_ten(self):
        """Test language tables are top ten."""
        records = [
            make_record(f"r{i}", 1.0, series={"Overall": [1.0], "ko": [float(i + 1)]})
            for i in range(12)
        ]
        (table,) = language_tables(records)

        assert len(table) == 10
        assert table.names()[0] == "r11"

    def test_unknown_code_title(self):
        """Test unrecognised codes are titled unidentified."""
        records = [make_record("a", 1.0, series={"Overall": [1.0], "xx": [1.0]})]
        (table,) = language_tables(records)

        assert table.title == "unidentified"


class TestBuildReportTables:
    """Tests for build_report_tables function."""

    def test_sections_in_order(self, sample_records):
        """Test overall, then categories, then languages."""
        tables = build_report_tables(sample_records)
        kinds = [t.kind for t in tables]

        assert kinds[0] == TableKind.OVERALL
        assert kinds.index(TableKind.LANGUAGE) > kinds.index(TableKind.CATEGORY)

    def test_empty_tables_dropped(self):
        """Test a category nobody read is omitted."""
        records = [make_record("a", 5.0, counts={"Book": 5.0, "Game": 0.0})]
        tables = build_report_tables(records)

        assert [t.key for t in tables if t.kind == TableKind.CATEGORY] == ["Book"]
        assert all(not t.is_empty for t in tables)
