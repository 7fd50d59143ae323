"""
Researcher agent.

Researches one delegated topic in a think/act loop (web search and
reflection tools), then compresses its findings for the supervisor.
Each researcher owns a private message history.
"""

from deep_research.researcher.schemas import ResearcherState
from deep_research.researcher.graph.build import create_researcher_graph

__all__ = ["ResearcherState", "create_researcher_graph"]
