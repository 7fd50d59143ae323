"""
Supervisor decision node.

Asks the model what to do next given the research brief and everything
delegated so far.
"""

import logging
import time
from typing import Any, Awaitable, Callable, Dict

from deep_research.prompts.builders import build_lead_researcher_prompt
from deep_research.shared.schemas.messages import SystemTurn
from deep_research.shared.services import Services
from deep_research.shared.tools.registry import ToolRegistry
from deep_research.supervisor.graph.config import SupervisorGraphConfig
from deep_research.supervisor.schemas import SupervisorState


logger = logging.getLogger(__name__)


def create_supervisor_node(
    services: Services, config: SupervisorGraphConfig, tools: ToolRegistry
) -> Callable[[SupervisorState], Awaitable[Dict[str, Any]]]:
    """Build the DECIDING node."""

    async def supervisor(state: SupervisorState) -> Dict[str, Any]:
        """
        Coordinate research activities.

        Sends the lead-researcher prompt plus the supervisor history to the
        model with ConductResearch, ResearchComplete and think_tool bound,
        and counts one decision cycle.

        Args:
            state: Current supervisor state

        Returns:
            State updates with the model turn and the new iteration count
        """
        session_id = state.get("session_id") or "unknown"
        iteration = state.get("research_iterations", 0) + 1
        _log = f"[session={session_id}] [graph=supervisor] [node=supervisor] "

        history = state.get("supervisor_messages", [])
        logger.info(
            f"{_log}Entering node | iteration={iteration}/"
            f"{config.max_researcher_iterations}, history={len(history)}"
        )

        system_prompt = build_lead_researcher_prompt(
            max_concurrent_research_units=config.max_concurrent_research_units,
            max_researcher_iterations=config.max_researcher_iterations,
        )

        start_time = time.perf_counter()
        response = await services.llm.invoke(
            [SystemTurn(content=system_prompt), *history],
            tools.specs,
            model=config.model,
        )
        duration_ms = (time.perf_counter() - start_time) * 1000

        logger.info(
            f"{_log}LLM responded | duration={duration_ms:.0f}ms, "
            f"tool_calls={[call.name for call in response.tool_calls]}"
        )

        return {
            "supervisor_messages": [response],
            "research_iterations": iteration,
        }

    return supervisor
