"""Repository search proxy for the GitHub search API."""

import logging
from dataclasses import dataclass

import httpx

from repo_search.config import get_settings
from repo_search.exceptions import UpstreamError, UpstreamUnavailableError

logger = logging.getLogger(__name__)


@dataclass
class Repository:
    """A search hit reshaped for API clients."""

    name: str
    description: str | None
    stars: int
    url: str


class SearchService:
    """Forward repository searches upstream and project the results."""

    ACCEPT = "application/vnd.github.v3+json"

    def __init__(self, transport: httpx.AsyncBaseTransport | None = None) -> None:
        """Initialize the search service.

        Args:
            transport: Optional httpx transport, used to stub the upstream API
        """
        settings = get_settings()
        self.api_url = settings.search_api_url
        self.user_agent = settings.search_user_agent
        self.timeout = settings.search_timeout_seconds
        self.transport = transport

    async def search(self, query: str) -> list[Repository]:
        """Search repositories matching ``query``.

        Makes a single attempt; a non-success status raises UpstreamError
        carrying the upstream body. Transport failures and malformed success
        bodies raise UpstreamUnavailableError.
        """
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                response = await client.get(
                    self.api_url,
                    params={"q": query},
                    headers={"Accept": self.ACCEPT, "User-Agent": self.user_agent},
                )
        except httpx.HTTPError as e:
            logger.error(f"HTTP error calling search upstream: {e}")
            raise UpstreamUnavailableError() from e

        if not response.is_success:
            logger.warning(f"Search upstream returned {response.status_code} for query {query!r}")
            raise UpstreamError(response.text, response.status_code)

        try:
            data = response.json()
            return [
                Repository(
                    name=item["name"],
                    description=item.get("description"),
                    stars=item["stargazers_count"],
                    url=item["html_url"],
                )
                for item in data.get("items", [])
            ]
        except (ValueError, AttributeError, KeyError, TypeError) as e:
            logger.warning(f"Unexpected search upstream payload: {e}")
            raise UpstreamUnavailableError() from e
