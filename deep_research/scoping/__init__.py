"""
Scoping agent.

Decides whether the user's request needs a clarifying question and, once
it does not, turns the conversation into a research brief.
"""

from deep_research.scoping.schemas import ClarifyWithUser, ResearchQuestion
from deep_research.scoping.build import create_scoping_graph

__all__ = ["ClarifyWithUser", "ResearchQuestion", "create_scoping_graph"]
