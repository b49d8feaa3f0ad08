"""
Base class for navigator strategies.

Navigators implement the discovery phase - finding every participant
worth fetching from the contest's ranking listing.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from urllib.parse import urljoin

import structlog

from tadoku_stats.core.http_client import DEFAULT_USER_AGENT, HttpClient

logger = structlog.get_logger(__name__)


@dataclass
class ContestConfig:
    """Configuration for the contest website."""

    base_url: str
    ranking_path: str = "/ranking"
    user_path: str = "/users/{user_id}"  # Must contain {user_id}

    # Fetching
    requests_per_second: float = 2.0
    timeout: float = 30.0
    user_agent: str = DEFAULT_USER_AGENT

    @property
    def ranking_url(self) -> str:
        return urljoin(self.base_url, self.ranking_path)

    def user_url(self, user_id: str) -> str:
        """URL of one participant's profile page."""
        return urljoin(self.base_url, self.user_path.format(user_id=user_id))

    @classmethod
    def from_dict(cls, data: dict) -> "ContestConfig":
        """Create from dictionary (e.g., from YAML)."""
        return cls(
            base_url=data["base_url"],
            ranking_path=data.get("ranking_path", "/ranking"),
            user_path=data.get("user_path", "/users/{user_id}"),
            requests_per_second=float(data.get("requests_per_second", 2.0)),
            timeout=float(data.get("timeout", 30.0)),
            user_agent=data.get("user_agent") or DEFAULT_USER_AGENT,
        )


class NavigatorStrategy(ABC):
    """
    Abstract base class for navigator strategies.

    Navigators turn a listing page into the ids of profiles to extract.
    """

    def __init__(self):
        self.logger = logger.bind(navigator=self.__class__.__name__)

    @abstractmethod
    async def discover(self, client: HttpClient, config: ContestConfig) -> list[str]:
        """
        Discover participant ids.

        Args:
            client: Open HTTP client
            config: Contest configuration

        Returns:
            Participant ids in listing order
        """
        pass
