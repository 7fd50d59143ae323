"""
Graph configuration for the researcher agent.

Centralizes configuration options for the researcher LangGraph workflow.
"""

from dataclasses import dataclass


@dataclass
class ResearcherGraphConfig:
    """
    Configuration for the researcher graph.

    Attributes:
        recursion_limit: Maximum number of graph steps for one research topic
        model: Model used for the think/act loop and for compression
        summarization_model: Model used to summarize fetched webpages
        max_search_results: Results requested per search query
        search_topic: Topic filter passed to the search service
        include_raw_content: Whether searches request full page text
        compress_max_tokens: Token ceiling for the compressed research summary
        fallback_content_chars: Characters of raw page text kept when
            summarization fails
    """

    recursion_limit: int = 100
    model: str = "gpt-4.1"
    summarization_model: str = "gpt-4.1"
    max_search_results: int = 3
    search_topic: str = "general"
    include_raw_content: bool = True
    compress_max_tokens: int = 32000
    fallback_content_chars: int = 1000


# Default configuration instance
DEFAULT_CONFIG = ResearcherGraphConfig()
