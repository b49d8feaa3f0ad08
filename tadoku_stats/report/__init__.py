"""
Plain text and HTML report rendering.
"""

from .renderer import brief_summary, render_report, render_table

__all__ = ["brief_summary", "render_report", "render_table"]
