"""
Report rendering.

Tables render as plain text or as an HTML fragment. In brief mode
category tables collapse into a short narrative about the top two
readers; other tables are always listed in full.
"""

import html
from collections.abc import Iterable

import structlog

from tadoku_stats.core.lookups import category_wording
from tadoku_stats.core.models import RankTable, TableKind
from tadoku_stats.core.normalizer import format_value

logger = structlog.get_logger(__name__)


def _row_lines(table: RankTable) -> list[str]:
    return [
        f"{rank}. {entry.name} {format_value(entry.value)}"
        for rank, entry in enumerate(table.entries, 1)
    ]


def brief_summary(table: RankTable) -> str:
    """
    Two-sentence narrative for a category table.

    "The top bookworm for books was alice, with 91.00 pages. In second
    place was bob, with 40.00 pages."
    """
    wording = category_wording(table.key or table.title)
    top = table.entries[0]
    text = (
        f"The top {wording.actor} for {wording.phrase} was {top.name}, "
        f"with {format_value(top.value)} {wording.unit}."
    )
    if len(table.entries) > 1:
        second = table.entries[1]
        text += (
            f" In second place was {second.name}, "
            f"with {format_value(second.value)} {wording.unit}."
        )
    return text


def _is_brief(table: RankTable, brief: bool) -> bool:
    return brief and table.kind == TableKind.CATEGORY


def render_text(table: RankTable, brief: bool = False) -> str:
    """Render one table as plain text."""
    if _is_brief(table, brief):
        return f"{table.title}\n{brief_summary(table)}\n"
    return "\n".join([table.title, *_row_lines(table)]) + "\n"


def render_html(table: RankTable, brief: bool = False) -> str:
    """Render one table as an HTML fragment (heading plus paragraph)."""
    heading = f"<h2>{html.escape(table.title)}</h2>"
    if _is_brief(table, brief):
        body = html.escape(brief_summary(table))
    else:
        body = "<br>\n".join(html.escape(line) for line in _row_lines(table))
    return f"{heading}\n<p>\n{body}\n</p>\n"


def render_table(table: RankTable, as_html: bool = False, brief: bool = False) -> str:
    """
    Render one table.

    Args:
        table: Table to render
        as_html: HTML fragment instead of plain text
        brief: Narrative form for category tables

    Returns:
        Rendered text, or "" if the table has no rows
    """
    if table.is_empty:
        return ""
    if as_html:
        return render_html(table, brief)
    return render_text(table, brief)


def render_report(
    tables: Iterable[RankTable],
    as_html: bool = False,
    brief: bool = False,
) -> str:
    """
    Render a full report, skipping empty tables.

    Sections are separated by a blank line.
    """
    sections = [render_table(t, as_html=as_html, brief=brief) for t in tables]
    sections = [s for s in sections if s]

    logger.info(
        "report_rendered",
        sections=len(sections),
        format="html" if as_html else "text",
        brief=brief,
    )
    return "\n".join(sections)
