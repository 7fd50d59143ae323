"""
Graph construction for the researcher agent.

Builds and compiles the LangGraph workflow for researching one topic.
"""

from typing import Any, Dict, Optional

from langgraph.graph import StateGraph, END

from deep_research.researcher.graph.config import ResearcherGraphConfig, DEFAULT_CONFIG
from deep_research.researcher.nodes.research import (
    create_compress_node,
    create_llm_call_node,
    create_tool_node,
)
from deep_research.researcher.nodes.routing import should_continue
from deep_research.researcher.schemas import ResearcherState
from deep_research.researcher.tools import create_researcher_tools
from deep_research.shared.schemas.messages import HumanTurn
from deep_research.shared.services import Services


def create_researcher_graph(
    services: Services,
    config: Optional[ResearcherGraphConfig] = None,
):
    """
    Create and compile the LangGraph workflow for one research topic.

    The graph structure is:
        Entry → llm_call → should_continue()
                              ├→ tool calls → tool_node → llm_call
                              └→ none → compress_research → END

    Args:
        services: LLM and search service handles
        config: Optional configuration. Uses DEFAULT_CONFIG if not provided.

    Returns:
        Compiled LangGraph application ready for execution.
    """
    if config is None:
        config = DEFAULT_CONFIG

    tools = create_researcher_tools(services, config)

    graph = StateGraph(ResearcherState)

    # Add nodes
    graph.add_node("llm_call", create_llm_call_node(services, config, tools))
    graph.add_node("tool_node", create_tool_node(tools))
    graph.add_node("compress_research", create_compress_node(services, config))

    # Set entry point and edges
    graph.set_entry_point("llm_call")
    graph.add_conditional_edges(
        "llm_call",
        should_continue,
        {
            "tool_node": "tool_node",
            "compress_research": "compress_research",
        },
    )
    graph.add_edge("tool_node", "llm_call")
    graph.add_edge("compress_research", END)

    app = graph.compile()

    return app


def create_initial_state(
    research_topic: str, session_id: Optional[str] = None
) -> Dict[str, Any]:
    """Fresh researcher state seeded with the topic as its only turn."""
    return {
        "research_topic": research_topic,
        "researcher_messages": [HumanTurn(content=research_topic)],
        "tool_call_iterations": 0,
        "compressed_research": "",
        "raw_notes": [],
        "session_id": session_id,
    }
