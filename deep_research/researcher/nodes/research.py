"""
Researcher nodes for the LangGraph workflow.

- llm_call: decide the next action (search, reflect, or stop)
- tool_node: execute every tool call of the latest model turn
- compress_research: condense the findings once the model stops calling tools

Nodes are built by factories that close over the service handles, so the
same node code runs against real or fake services.
"""

import logging
import time
from typing import Any, Awaitable, Callable, Dict

from deep_research.notes.pipeline import extract_raw_notes
from deep_research.prompts.builders import (
    build_compress_human_prompt,
    build_compress_system_prompt,
    build_research_agent_prompt,
)
from deep_research.researcher.graph.config import ResearcherGraphConfig
from deep_research.researcher.schemas import ResearcherState
from deep_research.shared.schemas.messages import (
    HumanTurn,
    SystemTurn,
    last_tool_calls,
)
from deep_research.shared.services import Services
from deep_research.shared.tools.registry import ToolRegistry


logger = logging.getLogger(__name__)


Node = Callable[[ResearcherState], Awaitable[Dict[str, Any]]]


def _log_prefix(state: ResearcherState, node: str) -> str:
    session_id = state.get("session_id") or "unknown"
    topic = (state.get("research_topic") or "")[:40]
    return f"[session={session_id}] [graph=researcher] [node={node}] [topic={topic!r}] "


def create_llm_call_node(
    services: Services, config: ResearcherGraphConfig, tools: ToolRegistry
) -> Node:
    """Build the THINKING node."""

    async def llm_call(state: ResearcherState) -> Dict[str, Any]:
        """
        Ask the model for the next step.

        The model sees the research system prompt plus the researcher's
        private history, with the search and reflection tools bound.
        """
        _log = _log_prefix(state, "llm_call")
        history = state.get("researcher_messages", [])
        logger.info(f"{_log}Calling LLM | model={config.model}, history={len(history)}")

        start_time = time.perf_counter()
        response = await services.llm.invoke(
            [SystemTurn(content=build_research_agent_prompt()), *history],
            tools.specs,
            model=config.model,
        )
        duration_ms = (time.perf_counter() - start_time) * 1000

        logger.info(
            f"{_log}LLM responded | duration={duration_ms:.0f}ms, "
            f"tool_calls={[call.name for call in response.tool_calls]}"
        )
        return {"researcher_messages": [response]}

    return llm_call


def create_tool_node(tools: ToolRegistry) -> Node:
    """Build the ACTING node."""

    async def tool_node(state: ResearcherState) -> Dict[str, Any]:
        """
        Execute all tool calls from the previous model turn.

        Every call gets exactly one result, in call order, even when the
        tool is unknown or fails.
        """
        _log = _log_prefix(state, "tool_node")
        calls = last_tool_calls(state.get("researcher_messages", []))
        iteration = state.get("tool_call_iterations", 0) + 1

        logger.info(f"{_log}Executing {len(calls)} tool calls | iteration={iteration}")
        results = await tools.execute_all(calls)

        return {
            "researcher_messages": results,
            "tool_call_iterations": iteration,
        }

    return tool_node


def create_compress_node(services: Services, config: ResearcherGraphConfig) -> Node:
    """Build the SUMMARIZING node."""

    async def compress_research(state: ResearcherState) -> Dict[str, Any]:
        """
        Compress research findings into a concise summary.

        Returns the compressed text plus the raw tool and model output of
        the whole history as a single newline-joined note.
        """
        _log = _log_prefix(state, "compress_research")
        history = state.get("researcher_messages", [])

        logger.info(
            f"{_log}Compressing research | history={len(history)}, "
            f"tool_iterations={state.get('tool_call_iterations', 0)}"
        )

        response = await services.llm.invoke(
            [
                SystemTurn(content=build_compress_system_prompt()),
                *history,
                HumanTurn(
                    content=build_compress_human_prompt(state.get("research_topic", ""))
                ),
            ],
            model=config.model,
            max_tokens=config.compress_max_tokens,
        )

        raw_notes = extract_raw_notes(history)
        logger.info(
            f"{_log}Research compressed | compressed_chars={len(response.content)}, "
            f"raw_chars={len(raw_notes)}"
        )

        return {
            "compressed_research": response.content,
            "raw_notes": [raw_notes],
        }

    return compress_research
