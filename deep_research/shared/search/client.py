"""
Web search service.

Defines the search interface used by the researcher's search tool and an
implementation that calls the Tavily Search API over httpx.
"""

import logging
import os
from abc import ABC, abstractmethod
from typing import List, Optional

import httpx
from dotenv import load_dotenv
from pydantic import BaseModel, Field

load_dotenv()


logger = logging.getLogger(__name__)

TAVILY_SEARCH_URL = "https://api.tavily.com/search"


class SearchServiceError(Exception):
    """Raised when the search backend cannot be reached or answers badly."""

    pass


class SearchResult(BaseModel):
    """A single ranked search hit."""

    url: str = Field(description="Result URL (deduplication key)")
    title: str = Field(default="", description="Page title")
    content: str = Field(default="", description="Snippet returned by the engine")
    raw_content: Optional[str] = Field(
        default=None, description="Full page text, when requested and available"
    )


class SearchService(ABC):
    """Web search interface consumed by the researcher."""

    @abstractmethod
    async def search(
        self,
        query: str,
        max_results: int = 3,
        topic: str = "general",
        include_raw_content: bool = True,
    ) -> List[SearchResult]:
        """
        Run one search query.

        Args:
            query: Query string
            max_results: Maximum results to return
            topic: Topic filter ("general", "news", "finance")
            include_raw_content: Whether to request full page text

        Returns:
            Ranked list of results.
        """


class TavilySearchService(SearchService):
    """SearchService backed by the Tavily Search API."""

    def __init__(
        self,
        api_key: str,
        client: Optional[httpx.AsyncClient] = None,
        timeout: float = 30.0,
        search_depth: str = "basic",
    ):
        self._api_key = api_key
        self._client = client or httpx.AsyncClient(timeout=timeout)
        self._search_depth = search_depth

    @classmethod
    def from_env(cls, timeout: float = 30.0) -> "TavilySearchService":
        """Build a client using TAVILY_API_KEY."""
        api_key = os.environ.get("TAVILY_API_KEY")
        if not api_key:
            raise ValueError(
                "TAVILY_API_KEY environment variable is not set. "
                "Please set it to your Tavily API key."
            )
        return cls(api_key=api_key, timeout=timeout)

    async def search(
        self,
        query: str,
        max_results: int = 3,
        topic: str = "general",
        include_raw_content: bool = True,
    ) -> List[SearchResult]:
        payload = {
            "query": query,
            "max_results": max_results,
            "topic": topic,
            "include_raw_content": include_raw_content,
            "search_depth": self._search_depth,
            "include_answer": False,
        }
        headers = {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self._api_key}",
        }

        try:
            resp = await self._client.post(
                TAVILY_SEARCH_URL, json=payload, headers=headers
            )
            resp.raise_for_status()
            data = resp.json()
        except httpx.HTTPError as e:
            raise SearchServiceError(f"Tavily search failed for '{query}': {e}") from e

        results = [
            SearchResult(
                url=item["url"],
                title=item.get("title") or "",
                content=item.get("content") or "",
                raw_content=item.get("raw_content"),
            )
            for item in data.get("results", [])
            if item.get("url")
        ]
        logger.debug(f"Tavily returned {len(results)} results for '{query}'")
        return results

    async def aclose(self) -> None:
        await self._client.aclose()
