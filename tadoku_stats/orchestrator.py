"""
Pipeline orchestrator.

Coordinates:
- Contest configuration loading
- Roster discovery
- Profile extraction, one page at a time
"""

from typing import Optional

import httpx
import structlog

from .config.loader import load_contest
from .core.http_client import HttpClient
from .core.models import UserRecord
from .navigators.base import ContestConfig
from .navigators.roster import RosterNavigator
from .parsers.profile import ProfileParser

logger = structlog.get_logger(__name__)


class StatsHarvester:
    """
    Fetches every active participant's profile and returns their records.

    Any failure aborts the whole run.
    """

    def __init__(
        self,
        config: Optional[ContestConfig] = None,
        config_path: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize harvester.

        Args:
            config: Contest configuration (loaded from config_path if not given)
            config_path: Path to a contest YAML file
            transport: Optional httpx transport for the shared client
        """
        self.config = config or load_contest(config_path)
        self.transport = transport

        self.stats = {
            "participants_discovered": 0,
            "profiles_extracted": 0,
        }

    async def run(self) -> list[UserRecord]:
        """
        Run discovery and extraction.

        Returns:
            One record per active participant, in ranking order
        """
        logger.info("starting_harvest", ranking_url=self.config.ranking_url)

        async with HttpClient.for_contest(self.config, self.transport) as client:
            user_ids = await RosterNavigator().discover(client, self.config)
            self.stats["participants_discovered"] = len(user_ids)

            records = await ProfileParser().extract_batch(client, user_ids, self.config)
            self.stats["profiles_extracted"] = len(records)

        logger.info("harvest_complete", **self.stats)
        return records

