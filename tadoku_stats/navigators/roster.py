"""
Roster navigator: ranking listing → participant ids.

The relevant part of the ranking page looks like:

    <table class="table ranking">
      <thead> ... </thead>
      <tbody>
        <tr>
          <td>1</td>
          <td><img .../></td>
          <td><a href="/users/801">username</a></td>
          <td>638.9</td>
        </tr>
        ...

Only the id in the profile link is kept; name and score come from
the profile page itself. The score column only filters out people
who have not logged anything yet.
"""

from tadoku_stats.core.errors import ExtractionError
from tadoku_stats.core.http_client import HttpClient
from tadoku_stats.core.selectors import Selector

from .base import ContestConfig, NavigatorStrategy


RANKING_BODY_SELECTOR = ".ranking tbody"

# Zero-based index of the page count column
PAGE_COUNT_COLUMN = 3

# Compared as text, exactly as the listing prints it
EMPTY_PAGE_COUNT = "0.0"


class RosterNavigator(NavigatorStrategy):
    """
    Finds participants with recorded activity on the ranking page.
    """

    async def discover(self, client: HttpClient, config: ContestConfig) -> list[str]:
        """
        Fetch the ranking page and extract participant ids.

        Args:
            client: Open HTTP client
            config: Contest configuration

        Returns:
            Ids in ranking order
        """
        self.logger.info("discovering_participants", url=config.ranking_url)

        html = await client.get_text(config.ranking_url)
        ids = self.extract_ids(Selector.from_html(html))

        self.logger.info("discovery_complete", count=len(ids))
        return ids

    def extract_ids(self, view: Selector) -> list[str]:
        """
        Extract ids of active participants from a parsed ranking page.

        Args:
            view: Parsed ranking page

        Returns:
            Ids in document order, excluding rows whose page count is "0.0"

        Raises:
            ExtractionError: If the table, a link or the page count column is missing
        """
        body = view.css_one(RANKING_BODY_SELECTOR).require("ranking_table").element

        ids = []
        skipped = 0
        for index, row in enumerate(body.find_all("tr")):
            link = row.find("a")
            if link is None or not link.get("href"):
                raise ExtractionError("profile_link", f"row {index}")

            cells = row.find_all("td")
            if len(cells) <= PAGE_COUNT_COLUMN:
                raise ExtractionError("page_count", f"row {index}")

            user_id = link["href"].rstrip("/").split("/")[-1]
            page_count = cells[PAGE_COUNT_COLUMN].get_text(strip=True)

            if page_count == EMPTY_PAGE_COUNT:
                skipped += 1
                continue
            ids.append(user_id)

        self.logger.debug("roster_extracted", active=len(ids), skipped=skipped)
        return ids
