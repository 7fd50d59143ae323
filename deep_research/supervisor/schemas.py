"""
Schemas for the research supervisor.

Defines the LangGraph state for one research phase and the argument
schemas of the supervisor's tools.
"""

from typing import TypedDict, List, Optional, Annotated
import operator

from pydantic import BaseModel, Field

from deep_research.shared.schemas.messages import Turn


class SupervisorState(TypedDict):
    """
    State schema for the supervisor graph.

    Lives for one research phase: created from the research brief and
    discarded once its notes are folded back into the session.
    """

    supervisor_messages: Annotated[List[Turn], operator.add]
    research_brief: str
    research_iterations: int

    # Accumulated findings
    notes: Annotated[List[str], operator.add]
    raw_notes: Annotated[List[str], operator.add]

    # Set when the phase ends (routes to END)
    research_complete: bool

    session_id: Optional[str]


class ConductResearch(BaseModel):
    """Arguments for delegating a research task to a sub-agent."""

    research_topic: str = Field(
        description=(
            "The topic to research. Should be a single topic, and should be "
            "described in high detail (at least a paragraph)."
        )
    )


class ResearchComplete(BaseModel):
    """Signals that the research process is complete (no arguments)."""

    pass
