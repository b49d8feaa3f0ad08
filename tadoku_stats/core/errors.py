"""
Exception taxonomy for the stats pipeline.

Everything the pipeline raises on its own account derives from StatsError.
Fetch and file errors from collaborators are not wrapped.
"""

from typing import Optional


class StatsError(Exception):
    """Base class for tadoku_stats errors."""

    pass


class ExtractionError(StatsError):
    """
    Raised when an expected markup node, attribute or number is missing.

    Carries the field that failed and, once known, the user being extracted
    so the caller can report exactly which page broke.
    """

    def __init__(self, field: str, detail: str = "", user: Optional[str] = None):
        self.field = field
        self.detail = detail
        self.user = user
        super().__init__(self._message())

    def _message(self) -> str:
        message = f"could not extract {self.field}"
        if self.detail:
            message += f": {self.detail}"
        if self.user is not None:
            message += f" (user {self.user})"
        return message

    def with_user(self, user: str) -> "ExtractionError":
        """Return a copy of this error tagged with the user id."""
        return ExtractionError(self.field, self.detail, user=user)


class RankingError(StatsError):
    """Raised when a metric value cannot be ordered."""

    pass
