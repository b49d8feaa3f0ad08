"""Tests for core models."""

import dataclasses

import pytest

from tadoku_stats.core.errors import ExtractionError, StatsError
from tadoku_stats.core.models import RankEntry, RankTable, TableKind, UserRecord


@pytest.fixture
def record():
    return UserRecord(
        name="alice",
        category_counts={"Book": 91.0, "Manga": 3.0},
        series_totals={"Overall": [1.5, 2.0], "jp": [1.5, 2.0]},
        total_points=638.9,
    )


class TestUserRecord:
    """Tests for UserRecord dataclass."""

    def test_count_for(self, record):
        """Test count lookup with default."""
        assert record.count_for("Book") == 91.0
        assert record.count_for("Game") == 0.0

    def test_series_sum(self, record):
        """Test series sum with default."""
        assert record.series_sum("jp") == 3.5
        assert record.series_sum("ko") == 0.0

    def test_frozen(self, record):
        """Test records cannot be reassigned."""
        with pytest.raises(dataclasses.FrozenInstanceError):
            record.name = "bob"

    def test_to_dict_field_names(self, record):
        """Test wire field names."""
        data = record.to_dict()

        assert set(data) == {"name", "categoryCounts", "seriesTotals", "totalPoints"}
        assert data["categoryCounts"]["Book"] == 91.0
        assert isinstance(data["totalPoints"], float)

    def test_from_dict(self, record):
        """Test rebuilding from dict."""
        assert UserRecord.from_dict(record.to_dict()) == record

    def test_from_dict_int_values(self):
        """Test integer numbers become floats."""
        restored = UserRecord.from_dict(
            {
                "name": "x",
                "categoryCounts": {"Book": 3},
                "seriesTotals": {"Overall": [1, 2]},
                "totalPoints": 3,
            }
        )

        assert restored.total_points == 3.0
        assert isinstance(restored.series_totals["Overall"][0], float)

    def test_from_dict_missing_field(self):
        """Test malformed dict."""
        with pytest.raises(StatsError):
            UserRecord.from_dict({"name": "x"})

    def test_from_dict_empty_counts(self, record):
        """Test a record without category counts is rejected."""
        data = record.to_dict()
        data["categoryCounts"] = {}

        with pytest.raises(StatsError, match="no category counts"):
            UserRecord.from_dict(data)

    def test_from_dict_without_overall(self, record):
        """Test a record without the Overall series is rejected."""
        data = record.to_dict()
        del data["seriesTotals"]["Overall"]

        with pytest.raises(StatsError, match="Overall"):
            UserRecord.from_dict(data)

    def test_from_dict_empty_series(self, record):
        """Test a record with no series at all is rejected."""
        data = record.to_dict()
        data["seriesTotals"] = {}

        with pytest.raises(StatsError):
            UserRecord.from_dict(data)


class TestRankTable:
    """Tests for RankTable dataclass."""

    def test_empty(self):
        """Test empty table."""
        table = RankTable(title="Book", kind=TableKind.CATEGORY, key="Book")

        assert table.is_empty
        assert len(table) == 0

    def test_names(self):
        """Test names in order."""
        table = RankTable(title="Overall", entries=[RankEntry("a", 2.0), RankEntry("b", 1.0)])
        assert table.names() == ["a", "b"]


class TestExtractionError:
    """Tests for ExtractionError."""

    def test_message(self):
        """Test message names the field."""
        error = ExtractionError("total_points", "not a number: 'x'")
        assert str(error) == "could not extract total_points: not a number: 'x'"

    def test_with_user(self):
        """Test user context is added."""
        error = ExtractionError("name").with_user("801")

        assert error.user == "801"
        assert error.field == "name"
        assert "(user 801)" in str(error)
