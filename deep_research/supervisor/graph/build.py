"""
Graph construction for the research supervisor.

Builds and compiles the supervisor LangGraph workflow, with the researcher
graph compiled once and shared by every delegation.
"""

from typing import Any, Dict, Optional

from langgraph.graph import StateGraph, END

from deep_research.researcher.graph.build import create_researcher_graph
from deep_research.researcher.graph.config import (
    ResearcherGraphConfig,
    DEFAULT_CONFIG as DEFAULT_RESEARCHER_CONFIG,
)
from deep_research.shared.schemas.messages import HumanTurn
from deep_research.shared.services import Services
from deep_research.supervisor.graph.config import SupervisorGraphConfig, DEFAULT_CONFIG
from deep_research.supervisor.nodes.routing import should_continue_supervision
from deep_research.supervisor.nodes.supervisor import create_supervisor_node
from deep_research.supervisor.nodes.supervisor_tools import create_supervisor_tools_node
from deep_research.supervisor.schemas import SupervisorState
from deep_research.supervisor.tools import create_supervisor_tools


def create_supervisor_graph(
    services: Services,
    config: Optional[SupervisorGraphConfig] = None,
    researcher_config: Optional[ResearcherGraphConfig] = None,
):
    """
    Create and compile the supervisor workflow.

    The graph structure is:
        Entry → supervisor → supervisor_tools → should_continue_supervision()
                                                  ├→ complete → END
                                                  └→ else → supervisor

    Args:
        services: LLM and search service handles
        config: Supervisor configuration. Uses DEFAULT_CONFIG if not provided.
        researcher_config: Configuration for delegated researchers.

    Returns:
        Compiled LangGraph application ready for execution.
    """
    if config is None:
        config = DEFAULT_CONFIG
    if researcher_config is None:
        researcher_config = DEFAULT_RESEARCHER_CONFIG

    tools = create_supervisor_tools()
    researcher_graph = create_researcher_graph(services, researcher_config)

    graph = StateGraph(SupervisorState)

    graph.add_node("supervisor", create_supervisor_node(services, config, tools))
    graph.add_node(
        "supervisor_tools",
        create_supervisor_tools_node(researcher_graph, config, researcher_config, tools),
    )

    graph.set_entry_point("supervisor")
    graph.add_edge("supervisor", "supervisor_tools")
    graph.add_conditional_edges(
        "supervisor_tools",
        should_continue_supervision,
        {
            "supervisor": "supervisor",
            END: END,
        },
    )

    app = graph.compile()

    return app


def create_initial_state(
    research_brief: str, session_id: Optional[str] = None
) -> Dict[str, Any]:
    """Fresh supervisor state for one research phase."""
    return {
        "supervisor_messages": [HumanTurn(content=f"{research_brief}.")],
        "research_brief": research_brief,
        "research_iterations": 0,
        "notes": [],
        "raw_notes": [],
        "research_complete": False,
        "session_id": session_id,
    }
