"""
Routing logic for the researcher LangGraph workflow.
"""

import logging
from typing import Literal

from deep_research.researcher.schemas import ResearcherState
from deep_research.shared.schemas.messages import last_tool_calls


logger = logging.getLogger(__name__)


def should_continue(
    state: ResearcherState,
) -> Literal["tool_node", "compress_research"]:
    """
    Keep acting while the model calls tools, otherwise summarize.

    Args:
        state: Current researcher state

    Returns:
        "tool_node" if the latest turn has tool calls, "compress_research" otherwise
    """
    session_id = state.get("session_id") or "unknown"
    _log = f"[session={session_id}] [graph=researcher] [router=should_continue] "

    calls = last_tool_calls(state.get("researcher_messages", []))
    if calls:
        logger.info(f"{_log}Routing to 'tool_node' | tool_calls={len(calls)}")
        return "tool_node"

    logger.info(f"{_log}Routing to 'compress_research' | no tool calls")
    return "compress_research"
