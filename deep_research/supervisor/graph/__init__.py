"""Graph construction and configuration for the research supervisor."""

from deep_research.supervisor.graph.build import (
    create_supervisor_graph,
    create_initial_state,
)
from deep_research.supervisor.graph.config import SupervisorGraphConfig

__all__ = ["create_supervisor_graph", "create_initial_state", "SupervisorGraphConfig"]
