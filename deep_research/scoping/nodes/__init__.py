"""Graph nodes for the scoping agent."""

from deep_research.scoping.nodes.scoping import (
    create_clarify_node,
    create_research_brief_node,
)
from deep_research.scoping.nodes.routing import route_after_clarification

__all__ = [
    "create_clarify_node",
    "create_research_brief_node",
    "route_after_clarification",
]
