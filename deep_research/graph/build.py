"""
Deep research graph construction.

Builds the top-level graph that sequences scoping -> research -> report.
The research phase runs the compiled supervisor graph from a wrapper node
so the supervisor's message history never enters the session state; only
its notes are folded back.
"""

import logging
from typing import Any, Awaitable, Callable, Dict, Optional

from langgraph.graph import StateGraph, END

from deep_research.graph.config import DeepResearchConfig
from deep_research.prompts.builders import build_final_report_prompt
from deep_research.scoping.nodes.routing import route_after_clarification
from deep_research.scoping.nodes.scoping import (
    create_clarify_node,
    create_research_brief_node,
)
from deep_research.shared.schemas.messages import HumanTurn, ModelTurn
from deep_research.shared.schemas.state import AgentState
from deep_research.shared.services import Services
from deep_research.supervisor.graph.build import (
    create_initial_state as create_supervisor_state,
    create_supervisor_graph,
)


logger = logging.getLogger(__name__)


Node = Callable[[AgentState], Awaitable[Dict[str, Any]]]


def create_research_supervisor_node(
    services: Services, config: DeepResearchConfig
) -> Node:
    """Build the wrapper node that runs one supervisor research phase."""
    supervisor_graph = create_supervisor_graph(
        services, config.supervisor, config.researcher
    )

    async def research_supervisor(state: AgentState) -> Dict[str, Any]:
        """
        Run the supervisor graph from the research brief.

        Returns:
            The phase's notes and raw notes, or a recorded error if the
            phase could not run.
        """
        session_id = state.get("session_id")
        _log = f"[session={session_id or 'unknown'}] [graph=deep_research] [node=research_supervisor] "

        brief = state.get("research_brief") or ""
        logger.info(f"{_log}Entering node | brief_chars={len(brief)}")

        try:
            logger.info(f"{_log}Delegating to supervisor graph")
            result = await supervisor_graph.ainvoke(
                create_supervisor_state(brief, session_id),
                config={"recursion_limit": config.supervisor.recursion_limit},
            )
        except Exception as e:
            logger.exception(f"{_log}Research supervisor failed: {e}")
            return {"errors": [f"Research supervisor error: {str(e)}"]}

        notes = result.get("notes", [])
        raw_notes = result.get("raw_notes", [])
        logger.info(
            f"{_log}Research phase finished | iterations={result.get('research_iterations', 0)}, "
            f"notes={len(notes)}, raw_notes={len(raw_notes)}"
        )
        return {"notes": notes, "raw_notes": raw_notes}

    return research_supervisor


def create_final_report_node(services: Services, config: DeepResearchConfig) -> Node:
    """Build the final report node."""

    async def final_report_generation(state: AgentState) -> Dict[str, Any]:
        """Synthesize all research findings into the final report."""
        session_id = state.get("session_id") or "unknown"
        _log = f"[session={session_id}] [graph=deep_research] [node=final_report_generation] "

        notes = state.get("notes", [])
        logger.info(f"{_log}Entering node | notes={len(notes)}")

        prompt = build_final_report_prompt(
            state.get("research_brief") or "", "\n".join(notes)
        )
        response = await services.llm.invoke(
            [HumanTurn(content=prompt)], model=config.report_model
        )

        logger.info(f"{_log}Final report written | chars={len(response.content)} -> END")
        return {
            "final_report": response.content,
            "messages": [
                ModelTurn(content=f"Here is the final report: {response.content}")
            ],
        }

    return final_report_generation


def create_deep_research_graph(
    services: Services,
    config: Optional[DeepResearchConfig] = None,
):
    """
    Create and compile the deep research graph.

    The graph structure is:
        Entry -> clarify_with_user -> route_after_clarification()
          -> question asked -> END
          -> else -> write_research_brief -> research_supervisor
                  -> final_report_generation -> END

    Args:
        services: LLM and search service handles
        config: Session configuration. Uses defaults if not provided.

    Returns:
        Compiled LangGraph application ready for execution.
    """
    if config is None:
        config = DeepResearchConfig()

    graph = StateGraph(AgentState)

    # Add nodes
    graph.add_node("clarify_with_user", create_clarify_node(services, config.scoping))
    graph.add_node(
        "write_research_brief", create_research_brief_node(services, config.scoping)
    )
    graph.add_node(
        "research_supervisor", create_research_supervisor_node(services, config)
    )
    graph.add_node(
        "final_report_generation", create_final_report_node(services, config)
    )

    # Edges
    graph.set_entry_point("clarify_with_user")
    graph.add_conditional_edges(
        "clarify_with_user",
        route_after_clarification,
        {
            "write_research_brief": "write_research_brief",
            END: END,
        },
    )
    graph.add_edge("write_research_brief", "research_supervisor")
    graph.add_edge("research_supervisor", "final_report_generation")
    graph.add_edge("final_report_generation", END)

    app = graph.compile()

    return app


def create_initial_state(messages, session_id: Optional[str] = None) -> Dict[str, Any]:
    """Fresh session state for a conversation."""
    return {
        "messages": list(messages),
        "need_clarification": False,
        "research_brief": None,
        "notes": [],
        "raw_notes": [],
        "errors": [],
        "final_report": None,
        "session_id": session_id,
    }
