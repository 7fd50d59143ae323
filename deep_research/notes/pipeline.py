"""
Note pipeline.

Turns raw search output into compact, deduplicated evidence and pulls
finished research out of message histories:

    result batches -> deduplicate_search_results -> summarize_search_results
                   -> format_search_output

    supervisor history -> extract_notes
    researcher history -> extract_raw_notes
"""

import asyncio
import logging
from typing import Iterable, List, Optional, Sequence

from deep_research.notes.schemas import DedupedResult, SearchResultSet, Summary
from deep_research.prompts.builders import build_summarize_webpage_prompt
from deep_research.shared.llm.client import LLMService
from deep_research.shared.schemas.messages import HumanTurn, Turn, filter_turns
from deep_research.shared.search.client import SearchResult


logger = logging.getLogger(__name__)


NO_RESULTS_MESSAGE = (
    "No valid search results found. Please try different search queries "
    "or use a different search API."
)

SOURCE_SEPARATOR = "-" * 80

DEFAULT_FALLBACK_CHARS = 1000


def deduplicate_search_results(
    result_batches: Iterable[Sequence[SearchResult]],
) -> SearchResultSet:
    """
    Merge result batches into a URL-keyed mapping.

    Batches are walked in arrival order and entries within a batch in rank
    order; the first result seen for a URL is kept and later duplicates are
    dropped.

    Args:
        result_batches: One list of results per query

    Returns:
        Mapping of URL to the first result seen for it
    """
    unique: SearchResultSet = {}
    for batch in result_batches:
        for result in batch:
            if result.url in unique:
                continue
            unique[result.url] = DedupedResult(
                title=result.title,
                content=result.content,
                raw_content=result.raw_content,
            )
    return unique


def render_summary(summary: Summary) -> str:
    return (
        f"<summary>\n{summary.summary}\n</summary>\n\n"
        f"<key_excerpts>\n{summary.key_excerpts}\n</key_excerpts>"
    )


def truncate_content(text: str, limit: int = DEFAULT_FALLBACK_CHARS) -> str:
    return text[:limit] + "..."


async def summarize_webpage(
    llm: LLMService,
    webpage_content: str,
    model: Optional[str] = None,
    fallback_chars: int = DEFAULT_FALLBACK_CHARS,
) -> str:
    """
    Summarize full page text with a structured model call.

    Any failure degrades to the first ``fallback_chars`` characters of the
    page followed by ``...``; nothing is raised.
    """
    try:
        summary = await llm.invoke_structured(
            [HumanTurn(content=build_summarize_webpage_prompt(webpage_content))],
            Summary,
            model=model,
        )
        return render_summary(summary)
    except Exception as e:
        logger.warning(f"Failed to summarize webpage, using truncated content: {e}")
        return truncate_content(webpage_content, fallback_chars)


async def summarize_or_passthrough(
    llm: LLMService,
    entry: DedupedResult,
    model: Optional[str] = None,
    fallback_chars: int = DEFAULT_FALLBACK_CHARS,
) -> str:
    """Summary of the page when full text is present, else the snippet."""
    if entry.raw_content:
        return await summarize_webpage(llm, entry.raw_content, model, fallback_chars)
    return entry.content


async def summarize_search_results(
    llm: LLMService,
    results: SearchResultSet,
    model: Optional[str] = None,
    fallback_chars: int = DEFAULT_FALLBACK_CHARS,
) -> SearchResultSet:
    """
    Replace each entry's content with its summary.

    Summaries are requested concurrently; the URL order is kept.
    """
    urls = list(results)
    contents = await asyncio.gather(
        *(
            summarize_or_passthrough(llm, results[url], model, fallback_chars)
            for url in urls
        )
    )
    return {
        url: DedupedResult(title=results[url].title, content=content)
        for url, content in zip(urls, contents)
    }


def format_search_output(results: SearchResultSet) -> str:
    """
    Render results as numbered source blocks.

    Returns NO_RESULTS_MESSAGE when ``results`` is empty.
    """
    if not results:
        return NO_RESULTS_MESSAGE

    output = "Search results: \n\n"
    for i, (url, result) in enumerate(results.items(), 1):
        output += f"\n\n--- SOURCE {i}: {result.title} ---\n"
        output += f"URL: {url}\n\n"
        output += f"SUMMARY:\n{result.content}\n\n"
        output += SOURCE_SEPARATOR + "\n"
    return output


def extract_notes(messages: Sequence[Turn]) -> List[str]:
    """Payloads of every tool-result turn, in history order."""
    return [turn.content for turn in filter_turns(messages, ["tool"])]


def extract_raw_notes(messages: Sequence[Turn]) -> str:
    """Tool-result and model text from a history, newline-joined."""
    return "\n".join(turn.content for turn in filter_turns(messages, ["tool", "ai"]))
