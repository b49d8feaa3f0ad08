"""
Profile page parser.

Pulls from a participant's page:
- the display name (avatar alt text)
- the reading-language label from the info block
- raw counts per category from the statistics table
- the total score from the same table
- the per-day series from the progress chart script

The chart script contains something like:

    series: [{
        name: "Overall",
        pointInterval: 86400000,
        data: [294.20000000000005, 0, 8.0, 57.6, 77.6]
    }, {
        name: "jp",
        pointInterval: 86400000,
        data: [285.20000000000005, 0, 0, 51.6, 77.6]
    }]

with one entry for Overall and one per language read.
"""

from tadoku_stats.core.errors import ExtractionError
from tadoku_stats.core.models import OVERALL_SERIES, UserRecord
from tadoku_stats.core.normalizer import extract_series, language_label, parse_number
from tadoku_stats.core.selectors import Selector, cell_texts

from .base import ParserStrategy


AVATAR_SELECTOR = ".avatar"
LANGUAGES_SELECTOR = ".languages"
STATS_HEAD_SELECTOR = ".table-bordered thead"
STATS_BODY_SELECTOR = ".table-bordered tbody"
CHART_MARKER = "progress_chart"
TOTAL_HEADING = "Total"


class ProfileParser(ParserStrategy):
    """
    Parser for participant profile pages.
    """

    def parse(self, view: Selector) -> UserRecord:
        """
        Parse a profile page into a UserRecord.

        Args:
            view: Parsed profile page

        Returns:
            UserRecord

        Raises:
            ExtractionError: Naming the first field that could not be read
        """
        name = view.attr(AVATAR_SELECTOR, "alt").require("name").value
        language = self._extract_language(view)
        category_counts, total_points = self._extract_stats_table(view)
        series_totals = self._extract_series(view, language)

        self.logger.debug(
            "profile_parsed",
            name=name,
            categories=len(category_counts),
            series=list(series_totals),
            total_points=total_points,
        )

        return UserRecord(
            name=name,
            category_counts=category_counts,
            series_totals=series_totals,
            total_points=total_points,
        )

    def _extract_language(self, view: Selector) -> str:
        element = view.css_one(LANGUAGES_SELECTOR).require("reading_language").element
        return language_label(element.get_text(" ", strip=True))

    def _extract_stats_table(self, view: Selector) -> tuple[dict[str, float], float]:
        """
        Read category counts and total points from the bordered table.

        Header row: an empty corner cell, one heading per category, "Total".
        First body row: a label cell then raw counts (empty cells skipped).
        Second body row: points per category, the last cell is the total.
        """
        head = view.css_one(STATS_HEAD_SELECTOR).require("category_headings").element
        body = view.css_one(STATS_BODY_SELECTOR).require("category_counts").element

        headings = [h for h in cell_texts(head, "th")[1:] if h != TOTAL_HEADING]
        if not headings:
            raise ExtractionError("category_headings", "no category columns")

        rows = body.find_all("tr")
        if len(rows) < 2:
            raise ExtractionError("total_points", f"expected 2 rows, found {len(rows)}")

        counts = [
            parse_number(text, "category_counts")
            for text in cell_texts(rows[0])[1:]
            if text != ""
        ]
        if not counts:
            raise ExtractionError("category_counts", "no counts in first row")

        # Trailing total count has no heading and is dropped here
        category_counts = dict(zip(headings, counts))

        points_cells = cell_texts(rows[1])
        if not points_cells:
            raise ExtractionError("total_points", "empty points row")
        total_points = parse_number(points_cells[-1], "total_points")

        return category_counts, total_points

    def _extract_series(self, view: Selector, language: str) -> dict[str, list[float]]:
        script = view.text_containing("script", CHART_MARKER).require("series").value
        pairs = extract_series(script)

        series_totals = dict(pairs)
        if OVERALL_SERIES not in series_totals:
            raise ExtractionError("series", f"no {OVERALL_SERIES!r} series")

        # No per-language breakdown: the single language equals Overall
        if len(pairs) == 1:
            series_totals[language] = list(series_totals[OVERALL_SERIES])

        return series_totals
