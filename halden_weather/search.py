"""Brave web-search client, disabled when no API key is configured."""

import logging

import httpx

from .models import Failure, Ok, SearchResult, parse_search_results
from .settings import Settings

logger = logging.getLogger("halden_weather.search")

SEARCH_DISABLED = "search disabled: no Brave API key configured"


class BraveSearchClient:
    def __init__(self, settings: Settings):
        self.settings = settings

    @property
    def enabled(self) -> bool:
        return self.settings.search_enabled

    async def search(self, query: str, count: int = 3) -> Ok[list[SearchResult]] | Failure:
        """Run one web search restricted to the configured country.

        `Ok([])` means the search ran and found nothing; `Failure` means it
        did not run or did not complete.
        """
        if not self.enabled:
            logger.warning("[Brave Search] API key not configured - search functionality disabled")
            return Failure(SEARCH_DISABLED)

        params = {"q": query, "count": str(count), "country": self.settings.country_code}
        headers = {
            "Accept": "application/json",
            "X-Subscription-Token": self.settings.brave_api_key,
            "User-Agent": self.settings.user_agent,
        }
        async with httpx.AsyncClient(follow_redirects=True) as client:
            try:
                response = await client.get(
                    self.settings.search_url,
                    params=params,
                    headers=headers,
                    timeout=self.settings.http_timeout,
                )
                response.raise_for_status()
                results = parse_search_results(response.json())
            except httpx.HTTPStatusError as e:
                logger.error(f"[Brave Search] API error: {e.response.status_code}")
                return Failure(f"Brave Search responded with status {e.response.status_code}")
            except httpx.RequestError as e:
                logger.exception(f"[Brave Search] request failed: {e}")
                return Failure(f"Brave Search request failed: {e}")
            except ValueError as e:
                logger.error(f"[Brave Search] malformed response: {e}")
                return Failure("Brave Search returned a malformed response")

        logger.info(f"[Brave Search] {len(results)} result(s) for {query!r}")
        return Ok(results)
