"""Graph nodes for the research supervisor."""

from deep_research.supervisor.nodes.supervisor import create_supervisor_node
from deep_research.supervisor.nodes.supervisor_tools import (
    create_supervisor_tools_node,
    RESEARCH_ERROR_MESSAGE,
)
from deep_research.supervisor.nodes.routing import should_continue_supervision

__all__ = [
    "create_supervisor_node",
    "create_supervisor_tools_node",
    "RESEARCH_ERROR_MESSAGE",
    "should_continue_supervision",
]
