"""
External service handles.

Bundles the language model and web search services so graph factories
receive them explicitly.
"""

from dataclasses import dataclass

from deep_research.shared.llm.client import (
    DEFAULT_MODEL,
    LLMService,
    OpenAIChatService,
    create_openai_client,
)
from deep_research.shared.search.client import SearchService, TavilySearchService


@dataclass(frozen=True)
class Services:
    """Service handles shared by every agent graph in a process."""

    llm: LLMService
    search: SearchService


def create_default_services(
    default_model: str = DEFAULT_MODEL,
    llm_timeout: float = 60.0,
    search_timeout: float = 30.0,
) -> Services:
    """
    Construct the production services from environment variables.

    Raises:
        ValueError: If OPENAI_API_KEY or TAVILY_API_KEY is missing.
    """
    llm = OpenAIChatService(
        create_openai_client(timeout=llm_timeout), default_model=default_model
    )
    search = TavilySearchService.from_env(timeout=search_timeout)
    return Services(llm=llm, search=search)
