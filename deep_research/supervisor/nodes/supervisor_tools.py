"""
Supervisor tools node.

Executes the supervisor's decisions: reflections are answered in place,
delegations fan out to one researcher graph each, and the phase ends when
the model is done, stops calling tools, or runs out of iterations.
"""

import asyncio
import logging
from typing import Any, Awaitable, Callable, Dict, List, Optional, Tuple

from deep_research.notes.pipeline import extract_notes
from deep_research.researcher.graph.build import create_initial_state
from deep_research.researcher.graph.config import ResearcherGraphConfig
from deep_research.shared.logging.config import log_state_transition
from deep_research.shared.schemas.messages import ToolCall, ToolResultTurn, last_tool_calls
from deep_research.shared.tools.registry import ToolRegistry, tool_not_found_message
from deep_research.supervisor.graph.config import SupervisorGraphConfig
from deep_research.supervisor.schemas import ConductResearch, SupervisorState
from deep_research.supervisor.tools import (
    CONDUCT_RESEARCH_TOOL_NAME,
    RESEARCH_COMPLETE_TOOL_NAME,
    THINK_TOOL_NAME,
)


logger = logging.getLogger(__name__)


RESEARCH_ERROR_MESSAGE = "Error synthesizing research report"


def end_reason(
    state: SupervisorState, config: SupervisorGraphConfig
) -> Optional[str]:
    """
    Why the phase should end now, or None to keep going.

    Checked against the latest turn before any of its tool calls run.
    """
    if state.get("research_iterations", 0) >= config.max_researcher_iterations:
        return "max_iterations"
    calls = last_tool_calls(state.get("supervisor_messages", []))
    if not calls:
        return "no_tool_calls"
    if any(call.name == RESEARCH_COMPLETE_TOOL_NAME for call in calls):
        return "research_complete"
    return None


def finish_phase(state: SupervisorState, reason: str) -> Dict[str, Any]:
    """
    Harvest notes from the supervisor history and end the phase.

    Tool calls in the final turn are left unanswered; the supervisor
    history is discarded with the phase.
    """
    notes = extract_notes(state.get("supervisor_messages", []))
    log_state_transition(
        "supervision_complete",
        state,
        extra={"reason": reason, "harvested_notes": len(notes)},
        logger=logger,
    )
    return {
        "notes": notes,
        "research_brief": state.get("research_brief", ""),
        "research_complete": True,
    }


def create_supervisor_tools_node(
    researcher_graph,
    config: SupervisorGraphConfig,
    researcher_config: ResearcherGraphConfig,
    tools: ToolRegistry,
) -> Callable[[SupervisorState], Awaitable[Dict[str, Any]]]:
    """
    Build the EXECUTING node.

    Args:
        researcher_graph: Compiled researcher graph run once per delegation
        config: Supervisor configuration (iteration cap, concurrency)
        researcher_config: Researcher configuration (recursion limit)
        tools: Supervisor tool registry (answers think_tool calls)
    """

    async def run_researcher(
        topic: str, session_id: Optional[str], semaphore: asyncio.Semaphore
    ) -> Optional[Dict[str, Any]]:
        _log = f"[session={session_id or 'unknown'}] [graph=supervisor] [researcher={topic[:40]!r}] "
        async with semaphore:
            logger.info(f"{_log}Researcher starting")
            try:
                result = await researcher_graph.ainvoke(
                    create_initial_state(topic, session_id),
                    config={"recursion_limit": researcher_config.recursion_limit},
                )
            except Exception as e:
                logger.exception(f"{_log}Researcher failed: {e}")
                return None
        logger.info(f"{_log}Researcher finished")
        return result

    async def execute_calls(
        state: SupervisorState, calls: List[ToolCall]
    ) -> Tuple[List[ToolResultTurn], List[str]]:
        session_id = state.get("session_id")
        results: List[Optional[ToolResultTurn]] = [None] * len(calls)

        research_indices = [
            i for i, call in enumerate(calls) if call.name == CONDUCT_RESEARCH_TOOL_NAME
        ]
        topics = [
            ConductResearch.model_validate(calls[i].args).research_topic
            for i in research_indices
        ]

        for i, call in enumerate(calls):
            if call.name == THINK_TOOL_NAME:
                results[i] = await tools.execute(call)
            elif call.name != CONDUCT_RESEARCH_TOOL_NAME:
                results[i] = ToolResultTurn(
                    tool_call_id=call.id,
                    name=call.name,
                    content=tool_not_found_message(call.name),
                )

        # Fan out, then wait for every researcher before touching state
        semaphore = asyncio.Semaphore(config.max_concurrent_research_units)
        outcomes = await asyncio.gather(
            *(run_researcher(topic, session_id, semaphore) for topic in topics)
        )

        raw_notes: List[str] = []
        for i, outcome in zip(research_indices, outcomes):
            call = calls[i]
            if outcome is None:
                content = RESEARCH_ERROR_MESSAGE
            else:
                content = outcome.get("compressed_research") or RESEARCH_ERROR_MESSAGE
                raw_notes.append("\n".join(outcome.get("raw_notes", [])))
            results[i] = ToolResultTurn(tool_call_id=call.id, name=call.name, content=content)

        return list(results), raw_notes

    async def supervisor_tools(state: SupervisorState) -> Dict[str, Any]:
        """
        Execute supervisor decisions, or end the research phase.

        Returns:
            Either the tool results and raw notes for this batch (loop back
            to the supervisor), or the harvested notes (end of phase).
        """
        session_id = state.get("session_id") or "unknown"
        _log = f"[session={session_id}] [graph=supervisor] [node=supervisor_tools] "

        reason = end_reason(state, config)
        if reason is not None:
            logger.info(
                f"{_log}Ending research phase | reason={reason}, "
                f"iterations={state.get('research_iterations', 0)}"
            )
            return finish_phase(state, reason)

        calls = last_tool_calls(state.get("supervisor_messages", []))
        logger.info(
            f"{_log}Executing {len(calls)} tool calls | "
            f"delegations={sum(call.name == CONDUCT_RESEARCH_TOOL_NAME for call in calls)}"
        )

        try:
            tool_results, raw_notes = await execute_calls(state, calls)
        except Exception as e:
            logger.exception(f"{_log}Error in supervisor tools, ending phase: {e}")
            return finish_phase(state, "error")

        logger.info(
            f"{_log}Batch complete | results={len(tool_results)}, raw_notes={len(raw_notes)}"
        )
        return {
            "supervisor_messages": tool_results,
            "raw_notes": raw_notes,
        }

    return supervisor_tools
