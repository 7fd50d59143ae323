"""
Schemas for the scoping agent.

Structured outputs for the clarification decision and the research brief.
"""

from pydantic import BaseModel, Field


class ClarifyWithUser(BaseModel):
    """Clarification decision and the message to send back to the user."""

    need_clarification: bool = Field(
        description="Whether the user needs to be asked a clarifying question."
    )
    question: str = Field(
        default="",
        description="A question to ask the user to clarify the report scope",
    )
    verification: str = Field(
        default="",
        description=(
            "Verify message that we will start research after the user has "
            "provided the necessary information."
        ),
    )


class ResearchQuestion(BaseModel):
    """A research brief derived from the conversation."""

    research_brief: str = Field(
        description="A research question that will be used to guide the research."
    )
