"""
Schemas for the researcher agent.

Defines the LangGraph state and the argument schemas of the researcher's
tools.
"""

from typing import TypedDict, List, Optional, Annotated
import operator

from pydantic import BaseModel, Field

from deep_research.shared.schemas.messages import Turn


class ResearcherState(TypedDict):
    """
    State schema for one delegated research topic.

    The message history is private to this researcher; sibling researchers
    and the supervisor never see it.
    """

    research_topic: str
    researcher_messages: Annotated[List[Turn], operator.add]
    tool_call_iterations: int

    # Output (populated by compress_research)
    compressed_research: str
    raw_notes: Annotated[List[str], operator.add]

    session_id: Optional[str]


class TavilySearchArgs(BaseModel):
    """Arguments for the web search tool."""

    query: str = Field(description="A single search query to execute")


class ThinkArgs(BaseModel):
    """Arguments for the reflection tool."""

    reflection: str = Field(
        description=(
            "Your detailed reflection on research progress, findings, gaps, "
            "and next steps"
        )
    )
