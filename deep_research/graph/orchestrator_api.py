"""
FastAPI endpoints for the deep research pipeline.

Provides the API to run clarification -> brief -> research -> report for
a conversation.
"""

import logging
import uuid
from typing import List, Literal, Optional

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field

from deep_research.graph.build import create_deep_research_graph, create_initial_state
from deep_research.graph.config import get_config
from deep_research.shared.schemas.messages import HumanTurn, ModelTurn
from deep_research.shared.services import create_default_services


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/research", tags=["research"])

# Compiled graph instance (shared across requests)
_graph = None


def get_graph():
    """Get or create the shared graph instance."""
    global _graph
    if _graph is None:
        _graph = create_deep_research_graph(create_default_services(), get_config())
    return _graph


# ============================================================================
# Request/Response Models
# ============================================================================


class ConversationMessage(BaseModel):
    """A single message of the user conversation."""

    role: Literal["user", "assistant"] = Field(description="Message author")
    content: str = Field(description="Message text")


class ResearchRunRequest(BaseModel):
    """Request to run the research pipeline."""

    messages: List[ConversationMessage] = Field(
        min_length=1, description="Conversation so far, oldest first"
    )


class ResearchRunResponse(BaseModel):
    """Response from the research pipeline."""

    session_id: str = Field(description="Pipeline session identifier")
    status: Literal["needs_clarification", "complete", "error"] = Field(
        description="Pipeline status"
    )
    question: Optional[str] = Field(
        default=None, description="Clarifying question, when one is needed"
    )
    research_brief: Optional[str] = Field(
        default=None, description="Research brief derived from the conversation"
    )
    final_report: Optional[str] = Field(default=None, description="Final report")
    notes: List[str] = Field(
        default_factory=list, description="Compressed research notes"
    )
    errors: List[str] = Field(
        default_factory=list, description="Any errors encountered"
    )


def _to_turns(messages: List[ConversationMessage]):
    return [
        HumanTurn(content=m.content) if m.role == "user" else ModelTurn(content=m.content)
        for m in messages
    ]


# ============================================================================
# Endpoints
# ============================================================================


@router.post("/run", response_model=ResearchRunResponse)
async def run_research(request: ResearchRunRequest, graph=Depends(get_graph)):
    """
    Run the full research pipeline for a conversation.

    Returns a clarifying question if the request is under-specified,
    otherwise the research brief, notes and final report.
    """
    session_id = str(uuid.uuid4())
    _log = f"[session={session_id}] [graph=deep_research] [api=run] "

    logger.info(f"{_log}Pipeline starting | messages={len(request.messages)}")

    try:
        final_state = await graph.ainvoke(
            create_initial_state(_to_turns(request.messages), session_id)
        )
    except Exception as e:
        logger.exception(f"{_log}Pipeline failed: {e}")
        raise HTTPException(
            status_code=500,
            detail=f"Pipeline execution failed: {str(e)}",
        )

    errors = final_state.get("errors", [])

    if final_state.get("need_clarification"):
        status = "needs_clarification"
        question = final_state["messages"][-1].content
    else:
        status = "error" if errors else "complete"
        question = None

    logger.info(
        f"{_log}Pipeline finished | status={status}, "
        f"notes={len(final_state.get('notes', []))}, errors={len(errors)}"
    )

    return ResearchRunResponse(
        session_id=session_id,
        status=status,
        question=question,
        research_brief=final_state.get("research_brief"),
        final_report=final_state.get("final_report"),
        notes=final_state.get("notes", []),
        errors=errors,
    )
