"""
Graph construction for the scoping agent.

Standalone clarification + brief workflow, useful for scoping a request
without running research.
"""

from typing import Optional

from langgraph.graph import StateGraph, END

from deep_research.scoping.config import ScopingConfig, DEFAULT_CONFIG
from deep_research.scoping.nodes.routing import route_after_clarification
from deep_research.scoping.nodes.scoping import (
    create_clarify_node,
    create_research_brief_node,
)
from deep_research.shared.schemas.state import AgentState
from deep_research.shared.services import Services


def create_scoping_graph(
    services: Services,
    config: Optional[ScopingConfig] = None,
):
    """
    Create and compile the scoping workflow.

    The graph structure is:
        Entry → clarify_with_user → route_after_clarification()
                                      ├→ question asked → END
                                      └→ else → write_research_brief → END

    Args:
        services: LLM service handles
        config: Optional configuration. Uses DEFAULT_CONFIG if not provided.

    Returns:
        Compiled LangGraph application ready for execution.
    """
    if config is None:
        config = DEFAULT_CONFIG

    graph = StateGraph(AgentState)

    graph.add_node("clarify_with_user", create_clarify_node(services, config))
    graph.add_node("write_research_brief", create_research_brief_node(services, config))

    graph.set_entry_point("clarify_with_user")
    graph.add_conditional_edges(
        "clarify_with_user",
        route_after_clarification,
        {
            "write_research_brief": "write_research_brief",
            END: END,
        },
    )
    graph.add_edge("write_research_brief", END)

    app = graph.compile()

    return app
