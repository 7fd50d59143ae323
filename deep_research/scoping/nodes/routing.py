"""
Routing logic after the clarification node.
"""

import logging
from typing import Literal

from langgraph.graph import END

from deep_research.shared.schemas.state import AgentState


logger = logging.getLogger(__name__)


def route_after_clarification(
    state: AgentState,
) -> Literal["write_research_brief", "__end__"]:
    """
    Stop and wait for the user if a clarifying question was asked.

    Returns:
        END if clarification is needed, "write_research_brief" otherwise
    """
    session_id = state.get("session_id") or "unknown"
    _log = f"[session={session_id}] [graph=deep_research] [router=route_after_clarification] "

    if state.get("need_clarification", False):
        logger.info(f"{_log}Routing to END | awaiting user answer")
        return END

    logger.info(f"{_log}Routing to 'write_research_brief'")
    return "write_research_brief"
