"""
Async page fetcher for the contest site.

A client talks to one contest host: a single rate limiter spaces out
requests and every request carries the configured User-Agent.

There are no retries: a failed fetch raises and ends the run.
"""

import asyncio
import time
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Optional

import httpx
import structlog

if TYPE_CHECKING:
    from tadoku_stats.navigators.base import ContestConfig

logger = structlog.get_logger(__name__)


DEFAULT_USER_AGENT = "tadoku-stats/0.1.0"


@dataclass
class RateLimiter:
    """Keeps consecutive requests at least 1/requests_per_second apart."""
    requests_per_second: float = 2.0
    last_request: float = field(default=0.0, init=False)
    lock: asyncio.Lock = field(default_factory=asyncio.Lock, init=False)

    def __post_init__(self):
        if self.requests_per_second <= 0:
            raise ValueError(
                f"requests_per_second must be positive: {self.requests_per_second}"
            )

    @property
    def interval(self) -> float:
        return 1.0 / self.requests_per_second

    async def wait(self) -> None:
        """Sleep until the next request is allowed."""
        async with self.lock:
            elapsed = time.monotonic() - self.last_request
            if elapsed < self.interval:
                await asyncio.sleep(self.interval - elapsed)
            self.last_request = time.monotonic()


class HttpClient:
    """
    Rate-limited page fetcher.

    Usage:
        async with HttpClient.for_contest(config) as client:
            html = await client.get_text(config.ranking_url)
    """

    def __init__(
        self,
        requests_per_second: float = 2.0,
        timeout: float = 30.0,
        user_agent: str = DEFAULT_USER_AGENT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize HTTP client.

        Args:
            requests_per_second: Request rate towards the contest host
            timeout: Request timeout in seconds
            user_agent: User-Agent header sent with every request
            transport: Optional httpx transport (tests pass a MockTransport)
        """
        self.timeout = timeout
        self.user_agent = user_agent
        self.transport = transport
        self.rate_limiter = RateLimiter(requests_per_second=requests_per_second)
        self.pages_fetched = 0

        self._client: Optional[httpx.AsyncClient] = None

    @classmethod
    def for_contest(
        cls,
        config: "ContestConfig",
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> "HttpClient":
        """Build a client with the contest's rate, timeout and User-Agent."""
        return cls(
            requests_per_second=config.requests_per_second,
            timeout=config.timeout,
            user_agent=config.user_agent,
            transport=transport,
        )

    async def __aenter__(self) -> "HttpClient":
        self._client = httpx.AsyncClient(
            timeout=httpx.Timeout(self.timeout),
            follow_redirects=True,
            headers={"User-Agent": self.user_agent},
            transport=self.transport,
        )
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        if self._client:
            await self._client.aclose()
            self._client = None

    async def get_text(self, url: str) -> str:
        """
        Fetch a page and return its decoded body.

        Raises:
            RuntimeError: If used outside `async with`
            httpx.HTTPError: On network failure or non-2xx status
        """
        if not self._client:
            raise RuntimeError("Client not initialized. Use 'async with' context.")

        await self.rate_limiter.wait()

        response = await self._client.get(url)
        response.raise_for_status()
        self.pages_fetched += 1

        logger.debug("page_fetched", url=url, status=response.status_code)
        return response.text
