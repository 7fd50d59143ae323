"""Web search service interface and Tavily implementation."""

from deep_research.shared.search.client import (
    SearchResult,
    SearchService,
    SearchServiceError,
    TavilySearchService,
)

__all__ = [
    "SearchResult",
    "SearchService",
    "SearchServiceError",
    "TavilySearchService",
]
