"""
Researcher tools.

- tavily_search: search, deduplicate, summarize and format
- think_tool: record a reflection; no side effect beyond the acknowledgement
"""

import logging

from deep_research.notes.pipeline import (
    deduplicate_search_results,
    format_search_output,
    summarize_search_results,
)
from deep_research.researcher.graph.config import ResearcherGraphConfig
from deep_research.researcher.schemas import TavilySearchArgs, ThinkArgs
from deep_research.shared.services import Services
from deep_research.shared.tools.registry import ToolRegistry, ToolSpec


logger = logging.getLogger(__name__)


SEARCH_TOOL_NAME = "tavily_search"
THINK_TOOL_NAME = "think_tool"

SEARCH_TOOL_DESCRIPTION = (
    "Fetch results from the Tavily search API with content summarization. "
    "Use for comprehensive, accurate and up-to-date web information."
)

THINK_TOOL_DESCRIPTION = (
    "Tool for strategic reflection on research progress and decision-making. "
    "Use after each search to analyze results and plan next steps: what key "
    "information was found, what is missing, whether there is enough to "
    "answer, and whether to keep searching or provide the answer."
)


async def think(args: ThinkArgs) -> str:
    return f"Reflection recorded: {args.reflection}"


def create_think_tool() -> ToolSpec:
    return ToolSpec(
        name=THINK_TOOL_NAME,
        description=THINK_TOOL_DESCRIPTION,
        args_schema=ThinkArgs,
        handler=think,
    )


def create_search_tool(services: Services, config: ResearcherGraphConfig) -> ToolSpec:
    """
    Build the search tool bound to the given services.

    Args:
        services: Service handles (search + LLM for summarization)
        config: Researcher configuration (result count, topic, models)
    """

    async def tavily_search(args: TavilySearchArgs) -> str:
        logger.info(f"Searching | query={args.query!r}")
        batch = await services.search.search(
            args.query,
            max_results=config.max_search_results,
            topic=config.search_topic,
            include_raw_content=config.include_raw_content,
        )
        unique = deduplicate_search_results([batch])
        summarized = await summarize_search_results(
            services.llm,
            unique,
            model=config.summarization_model,
            fallback_chars=config.fallback_content_chars,
        )
        logger.info(
            f"Search finished | query={args.query!r}, results={len(batch)}, "
            f"unique={len(summarized)}"
        )
        return format_search_output(summarized)

    return ToolSpec(
        name=SEARCH_TOOL_NAME,
        description=SEARCH_TOOL_DESCRIPTION,
        args_schema=TavilySearchArgs,
        handler=tavily_search,
    )


def create_researcher_tools(
    services: Services, config: ResearcherGraphConfig
) -> ToolRegistry:
    """Registry holding the researcher's search and reflection tools."""
    return ToolRegistry([create_search_tool(services, config), create_think_tool()])
