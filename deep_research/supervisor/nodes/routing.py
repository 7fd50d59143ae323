"""
Routing logic for the supervisor LangGraph workflow.
"""

import logging
from typing import Literal

from langgraph.graph import END

from deep_research.supervisor.schemas import SupervisorState


logger = logging.getLogger(__name__)


def should_continue_supervision(
    state: SupervisorState,
) -> Literal["supervisor", "__end__"]:
    """
    Loop back to the supervisor until the tools node ends the phase.

    Args:
        state: Current supervisor state

    Returns:
        END if the phase is complete, "supervisor" otherwise
    """
    session_id = state.get("session_id") or "unknown"
    _log = f"[session={session_id}] [graph=supervisor] [router=should_continue_supervision] "

    if state.get("research_complete", False):
        logger.info(
            f"{_log}Routing to END | iterations={state.get('research_iterations', 0)}, "
            f"notes={len(state.get('notes', []))}"
        )
        return END

    logger.info(
        f"{_log}Routing to 'supervisor' (loop) | "
        f"iterations={state.get('research_iterations', 0)}"
    )
    return "supervisor"
