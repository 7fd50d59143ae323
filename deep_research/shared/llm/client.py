"""
Language model service.

Defines the interface the agent graphs use to talk to a chat model and an
implementation backed by the OpenAI Chat Completions API. Service handles
are constructed once at startup and passed into graph factories; there is
no module-level client.
"""

import json
import logging
import os
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Sequence, Type, TypeVar

from dotenv import load_dotenv
from openai import AsyncOpenAI
from pydantic import BaseModel

from deep_research.shared.schemas.messages import (
    HumanTurn,
    ModelTurn,
    SystemTurn,
    ToolCall,
    ToolResultTurn,
    Turn,
)
from deep_research.shared.tools.registry import ToolSpec

load_dotenv()


logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)

DEFAULT_MODEL = "gpt-4.1"


class LLMResponseError(Exception):
    """Raised when the model returns a response that cannot be used."""

    pass


class LLMService(ABC):
    """Chat model interface consumed by the agent graphs."""

    @abstractmethod
    async def invoke(
        self,
        turns: Sequence[Turn],
        tools: Optional[Sequence[ToolSpec]] = None,
        *,
        model: Optional[str] = None,
        max_tokens: Optional[int] = None,
        temperature: Optional[float] = None,
    ) -> ModelTurn:
        """
        Send a conversation to the model.

        Args:
            turns: Conversation history, system turn first if any
            tools: Tools the model may call
            model: Model identifier override
            max_tokens: Ceiling on generated tokens
            temperature: Sampling temperature override

        Returns:
            The model's turn: free text and/or tool calls.
        """

    @abstractmethod
    async def invoke_structured(
        self,
        turns: Sequence[Turn],
        schema: Type[T],
        *,
        model: Optional[str] = None,
        temperature: Optional[float] = None,
    ) -> T:
        """
        Send a conversation and constrain the reply to ``schema``.

        Returns:
            An instance of ``schema``.
        """


def to_openai_messages(turns: Sequence[Turn]) -> List[Dict[str, Any]]:
    """Convert turns into Chat Completions message dicts."""
    messages: List[Dict[str, Any]] = []
    for turn in turns:
        if isinstance(turn, SystemTurn):
            messages.append({"role": "system", "content": turn.content})
        elif isinstance(turn, HumanTurn):
            messages.append({"role": "user", "content": turn.content})
        elif isinstance(turn, ModelTurn):
            message: Dict[str, Any] = {
                "role": "assistant",
                "content": turn.content or (None if turn.tool_calls else ""),
            }
            if turn.tool_calls:
                message["tool_calls"] = [
                    {
                        "id": call.id,
                        "type": "function",
                        "function": {
                            "name": call.name,
                            "arguments": json.dumps(call.args),
                        },
                    }
                    for call in turn.tool_calls
                ]
            messages.append(message)
        elif isinstance(turn, ToolResultTurn):
            messages.append(
                {
                    "role": "tool",
                    "tool_call_id": turn.tool_call_id,
                    "content": turn.content,
                }
            )
    return messages


def _parse_tool_calls(raw_tool_calls) -> List[ToolCall]:
    calls = []
    for raw in raw_tool_calls or []:
        function = getattr(raw, "function", None)
        if function is None:
            continue
        try:
            args = json.loads(function.arguments or "{}")
        except json.JSONDecodeError:
            logger.warning(
                f"Malformed arguments for tool call {function.name} ({raw.id}); "
                f"passing empty arguments"
            )
            args = {}
        if not isinstance(args, dict):
            args = {}
        calls.append(ToolCall(name=function.name, args=args, id=raw.id))
    return calls


def create_openai_client(timeout: float = 60.0) -> AsyncOpenAI:
    """
    Create an async OpenAI client from the environment.

    Uses OPENAI_API_KEY for authentication and OPENAI_BASE_URL when set.
    """
    api_key = os.environ.get("OPENAI_API_KEY")
    if not api_key:
        raise ValueError(
            "OPENAI_API_KEY environment variable is not set. "
            "Please set it to your OpenAI API key."
        )
    base_url = os.environ.get("OPENAI_BASE_URL") or None
    return AsyncOpenAI(api_key=api_key, base_url=base_url, timeout=timeout)


class OpenAIChatService(LLMService):
    """LLMService backed by the OpenAI Chat Completions API."""

    def __init__(self, client: AsyncOpenAI, default_model: str = DEFAULT_MODEL):
        self._client = client
        self._default_model = default_model

    async def invoke(
        self,
        turns: Sequence[Turn],
        tools: Optional[Sequence[ToolSpec]] = None,
        *,
        model: Optional[str] = None,
        max_tokens: Optional[int] = None,
        temperature: Optional[float] = None,
    ) -> ModelTurn:
        kwargs: Dict[str, Any] = {
            "model": model or self._default_model,
            "messages": to_openai_messages(turns),
        }
        if tools:
            kwargs["tools"] = [tool.to_openai() for tool in tools]
        if max_tokens is not None:
            kwargs["max_completion_tokens"] = max_tokens
        if temperature is not None:
            kwargs["temperature"] = temperature

        response = await self._client.chat.completions.create(**kwargs)
        if not response.choices:
            raise LLMResponseError("Model returned no choices")

        message = response.choices[0].message
        return ModelTurn(
            content=(message.content or "").strip(),
            tool_calls=_parse_tool_calls(message.tool_calls),
        )

    async def invoke_structured(
        self,
        turns: Sequence[Turn],
        schema: Type[T],
        *,
        model: Optional[str] = None,
        temperature: Optional[float] = None,
    ) -> T:
        kwargs: Dict[str, Any] = {
            "model": model or self._default_model,
            "messages": to_openai_messages(turns),
            "response_format": schema,
        }
        if temperature is not None:
            kwargs["temperature"] = temperature

        completion = await self._client.chat.completions.parse(**kwargs)
        if not completion.choices:
            raise LLMResponseError("Model returned no choices")

        parsed = completion.choices[0].message.parsed
        if parsed is None:
            refusal = completion.choices[0].message.refusal
            raise LLMResponseError(
                f"Model did not return a {schema.__name__}"
                + (f": {refusal}" if refusal else "")
            )
        return parsed
