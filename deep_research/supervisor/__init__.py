"""
Research supervisor.

Decides what to research next, delegates sub-topics to parallel researcher
graphs, waits for all of them, and accumulates their findings until the
research is complete or the iteration cap is reached.
"""

from deep_research.supervisor.schemas import SupervisorState
from deep_research.supervisor.graph.build import create_supervisor_graph

__all__ = ["SupervisorState", "create_supervisor_graph"]
