"""Graph nodes for the researcher agent."""

from deep_research.researcher.nodes.research import (
    create_llm_call_node,
    create_tool_node,
    create_compress_node,
)
from deep_research.researcher.nodes.routing import should_continue

__all__ = [
    "create_llm_call_node",
    "create_tool_node",
    "create_compress_node",
    "should_continue",
]
