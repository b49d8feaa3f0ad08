"""
Ranking engine and standings views.
"""

from .engine import (
    build_table,
    overall_table,
    category_tables,
    language_tables,
    build_report_tables,
)

__all__ = [
    "build_table",
    "overall_table",
    "category_tables",
    "language_tables",
    "build_report_tables",
]
