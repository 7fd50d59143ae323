"""
Deep research agents.

This package contains:
- shared/: Common infrastructure (LLM and search services, tools, logging, schemas)
- notes/: Search result deduplication, summarization and note extraction
- researcher/: Researcher agent for one delegated topic
- supervisor/: Supervisor that fans research out to parallel researchers
- scoping/: Clarification and research brief generation
- graph/: Top-level pipeline (scoping -> supervisor -> final report)
"""

from deep_research.graph.build import create_deep_research_graph
from deep_research.supervisor.graph.build import create_supervisor_graph
from deep_research.researcher.graph.build import create_researcher_graph

__all__ = [
    "create_deep_research_graph",
    "create_supervisor_graph",
    "create_researcher_graph",
]
