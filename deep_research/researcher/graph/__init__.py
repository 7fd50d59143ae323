"""Graph construction and configuration for the researcher agent."""

from deep_research.researcher.graph.build import (
    create_researcher_graph,
    create_initial_state,
)
from deep_research.researcher.graph.config import ResearcherGraphConfig

__all__ = ["create_researcher_graph", "create_initial_state", "ResearcherGraphConfig"]
