"""
Tadoku Stats - reading contest statistics harvester.

Architecture:
- core/: Stable foundation (models, errors, selectors, normalizers, lookups, HTTP client)
- navigators/: Roster discovery from the ranking listing page
- parsers/: Per-user profile extraction
- ranking/: Ranking engine and derived standings views
- report/: Plain text and HTML rendering
- config/: YAML-driven contest definition
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
