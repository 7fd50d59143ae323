"""
Scoping nodes.

- clarify_with_user: decide whether the request needs a clarifying question
- write_research_brief: turn the conversation into a research brief

Both use structured output so routing decisions come from typed fields.
"""

import logging
from typing import Any, Awaitable, Callable, Dict

from deep_research.prompts.builders import (
    build_clarify_prompt,
    build_research_brief_prompt,
)
from deep_research.scoping.config import ScopingConfig
from deep_research.scoping.schemas import ClarifyWithUser, ResearchQuestion
from deep_research.shared.schemas.messages import (
    HumanTurn,
    ModelTurn,
    get_buffer_string,
)
from deep_research.shared.schemas.state import AgentState
from deep_research.shared.services import Services


logger = logging.getLogger(__name__)


Node = Callable[[AgentState], Awaitable[Dict[str, Any]]]


def create_clarify_node(services: Services, config: ScopingConfig) -> Node:
    """Build the clarification node."""

    async def clarify_with_user(state: AgentState) -> Dict[str, Any]:
        """
        Determine if the request has enough information to start research.

        Returns:
            ``need_clarification`` plus either the question or the
            verification message appended to the conversation.
        """
        session_id = state.get("session_id") or "unknown"
        _log = f"[session={session_id}] [graph=deep_research] [node=clarify_with_user] "

        if not config.allow_clarification:
            logger.info(f"{_log}Clarification disabled, skipping")
            return {"need_clarification": False}

        messages = state.get("messages", [])
        logger.info(f"{_log}Entering node | messages={len(messages)}")

        response = await services.llm.invoke_structured(
            [HumanTurn(content=build_clarify_prompt(get_buffer_string(messages)))],
            ClarifyWithUser,
            model=config.model,
            temperature=config.temperature,
        )

        if response.need_clarification:
            logger.info(f"{_log}Clarification needed -> END")
            return {
                "need_clarification": True,
                "messages": [ModelTurn(content=response.question)],
            }

        logger.info(f"{_log}No clarification needed -> write_research_brief")
        return {
            "need_clarification": False,
            "messages": [ModelTurn(content=response.verification)],
        }

    return clarify_with_user


def create_research_brief_node(services: Services, config: ScopingConfig) -> Node:
    """Build the research brief node."""

    async def write_research_brief(state: AgentState) -> Dict[str, Any]:
        """Transform the conversation history into a research brief."""
        session_id = state.get("session_id") or "unknown"
        _log = f"[session={session_id}] [graph=deep_research] [node=write_research_brief] "

        messages = state.get("messages", [])
        logger.info(f"{_log}Entering node | messages={len(messages)}")

        response = await services.llm.invoke_structured(
            [HumanTurn(content=build_research_brief_prompt(get_buffer_string(messages)))],
            ResearchQuestion,
            model=config.model,
            temperature=config.temperature,
        )

        logger.info(f"{_log}Research brief written | chars={len(response.research_brief)}")
        return {"research_brief": response.research_brief}

    return write_research_brief
