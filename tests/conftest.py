"""Shared fixtures: sample contest pages and records."""

from pathlib import Path

import pytest

from tadoku_stats.core.models import UserRecord
from tadoku_stats.core.selectors import Selector

FIXTURES = Path(__file__).parent / "fixtures"


def load_fixture(name: str) -> str:
    """Read a fixture page as text."""
    return (FIXTURES / name).read_text(encoding="utf-8")


@pytest.fixture
def ranking_html():
    return load_fixture("ranking.html")


@pytest.fixture
def userpage_html():
    return load_fixture("userpage.html")


@pytest.fixture
def single_language_html():
    return load_fixture("userpage_single.html")


@pytest.fixture
def unknown_category_html():
    return load_fixture("userpage_manga.html")


@pytest.fixture
def ranking_view(ranking_html):
    return Selector.from_html(ranking_html)


@pytest.fixture
def userpage_view(userpage_html):
    return Selector.from_html(userpage_html)


def make_record(name, total, counts=None, series=None):
    """Build a UserRecord with sensible defaults."""
    return UserRecord(
        name=name,
        category_counts=counts if counts is not None else {"Book": total},
        series_totals=series if series is not None else {"Overall": [total]},
        total_points=total,
    )


@pytest.fixture
def sample_records():
    """Three readers with overlapping categories and languages."""
    return [
        make_record(
            "alice",
            120.5,
            counts={"Book": 91.0, "Manga": 10.0},
            series={"Overall": [100.0, 20.5], "jp": [100.0, 20.5]},
        ),
        make_record(
            "bob",
            300.0,
            counts={"Book": 40.0, "News": 12.0},
            series={"Overall": [150.0, 150.0], "jp": [100.0, 50.0], "fr": [50.0, 100.0]},
        ),
        make_record(
            "carol",
            75.25,
            counts={"Manga": 200.0, "Book": 0.0},
            series={"Overall": [75.25], "zh": [75.25]},
        ),
    ]
