"""Tavily API client for technical search.

Tavily handles:
- JavaScript rendering (reads modern documentation sites)
- Content extraction, including the full page text when requested
- Relevance ranking (best sources first)
- An optional synthesized answer for the whole query
"""

import os
from typing import Any

from tavily import AsyncTavilyClient

from utils.logger import get_logger

from .base_provider import BaseSearchProvider
from .contracts import SearchPolicy, SearchResultSet

logger = get_logger(__name__)


class TavilySearchProvider(BaseSearchProvider):
    """Tavily-powered search provider."""

    name = "tavily"

    def __init__(self, api_key: str | None = None, client: Any | None = None):
        """
        Initialize Tavily provider.

        Args:
            api_key: Tavily API key (defaults to TAVILY_API_KEY env var)
            client: Pre-built async client exposing ``search(query, **options)``
        """
        if client is None:
            self.api_key = api_key or os.getenv("TAVILY_API_KEY")
            if not self.api_key:
                raise ValueError("TAVILY_API_KEY not found in environment")
            client = AsyncTavilyClient(api_key=self.api_key)
        else:
            self.api_key = api_key

        self.client = client
        logger.info("Tavily client initialized")

    async def search(self, query: str, policy: SearchPolicy) -> SearchResultSet | None:
        """
        Search the web using the Tavily API.

        Errors are not caught here: the orchestrator turns them into user-facing reports.

        Args:
            query: Search query
            policy: Options for this request

        Returns:
            SearchResultSet, or None if Tavily returned no payload
        """
        options = policy.to_provider_kwargs()
        logger.info(
            f"Tavily search: '{query[:100]}'",
            extra={"extra_fields": {"provider": self.name, **options}},
        )

        response = await self.client.search(query=query, **options)

        result_set = SearchResultSet.from_payload(response)
        if result_set is None:
            logger.warning("Tavily returned no payload")
            return None

        logger.info(
            f"Tavily returned {len(result_set.results)} results",
            extra={
                "extra_fields": {
                    "result_count": len(result_set.results),
                    "has_answer": bool(result_set.answer),
                }
            },
        )
        return result_set
