"""
Research session state schema.

Defines the top-level state that flows through the deep research graph:
the user conversation plus the brief, notes and report produced from it.
"""

from typing import TypedDict, List, Optional, Annotated
import operator

from deep_research.shared.schemas.messages import Turn


class AgentState(TypedDict):
    """
    State schema for one research session.

    The supervisor's own message history is NOT kept here; the research
    phase runs on its own state and only its notes are folded back.
    """

    # Conversation with the user
    messages: Annotated[List[Turn], operator.add]

    # Scoping
    need_clarification: bool
    research_brief: Optional[str]

    # Research findings (append-only)
    notes: Annotated[List[str], operator.add]
    raw_notes: Annotated[List[str], operator.add]

    # Failures recorded by wrapper nodes
    errors: Annotated[List[str], operator.add]

    # Final output
    final_report: Optional[str]

    # Session tracking
    session_id: Optional[str]
