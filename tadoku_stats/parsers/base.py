"""
Base class for parser strategies.

Parsers implement the extraction phase - converting a participant's
page into a UserRecord.
"""

from abc import ABC, abstractmethod

import structlog

from tadoku_stats.core.errors import ExtractionError
from tadoku_stats.core.http_client import HttpClient
from tadoku_stats.core.models import UserRecord
from tadoku_stats.core.selectors import Selector
from tadoku_stats.navigators.base import ContestConfig

logger = structlog.get_logger(__name__)


class ParserStrategy(ABC):
    """
    Abstract base class for parser strategies.

    Subclasses implement `parse` over an already parsed page; fetching
    and error tagging are shared.
    """

    def __init__(self):
        self.logger = logger.bind(parser=self.__class__.__name__)

    @abstractmethod
    def parse(self, view: Selector) -> UserRecord:
        """
        Extract a record from a parsed page.

        Raises:
            ExtractionError: If the page does not have the expected structure
        """
        pass

    async def extract(
        self,
        client: HttpClient,
        user_id: str,
        config: ContestConfig,
    ) -> UserRecord:
        """
        Fetch and parse one participant's page.

        Args:
            client: Open HTTP client
            user_id: Participant id from the roster
            config: Contest configuration

        Returns:
            UserRecord for the participant

        Raises:
            ExtractionError: Tagged with user_id if the page is malformed
            httpx.HTTPError: If the fetch fails
        """
        html = await client.get_text(config.user_url(user_id))

        try:
            return self.parse(Selector.from_html(html))
        except ExtractionError as e:
            raise e.with_user(user_id) from e

    async def extract_batch(
        self,
        client: HttpClient,
        user_ids: list[str],
        config: ContestConfig,
    ) -> list[UserRecord]:
        """
        Extract records for every id, in order.

        Stops at the first failure; there are no partial results.
        """
        records = []

        for i, user_id in enumerate(user_ids):
            self.logger.info(
                "extracting",
                index=i + 1,
                total=len(user_ids),
                user_id=user_id,
            )
            records.append(await self.extract(client, user_id, config))

        return records
