"""
Note pipeline.

Deduplicates, summarizes and formats search results, and extracts
research notes from agent message histories.
"""

from deep_research.notes.pipeline import (
    NO_RESULTS_MESSAGE,
    deduplicate_search_results,
    summarize_webpage,
    summarize_or_passthrough,
    summarize_search_results,
    format_search_output,
    extract_notes,
    extract_raw_notes,
)
from deep_research.notes.schemas import Summary, DedupedResult, SearchResultSet

__all__ = [
    "NO_RESULTS_MESSAGE",
    "deduplicate_search_results",
    "summarize_webpage",
    "summarize_or_passthrough",
    "summarize_search_results",
    "format_search_output",
    "extract_notes",
    "extract_raw_notes",
    "Summary",
    "DedupedResult",
    "SearchResultSet",
]
