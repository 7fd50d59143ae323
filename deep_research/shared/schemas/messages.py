"""
Conversation turn schemas.

Every message that flows through the agent graphs is one of a small,
closed set of turn types. Filtering and note extraction operate on the
``role`` tag instead of inspecting arbitrary objects.
"""

from typing import Any, Dict, Iterable, List, Literal, Sequence, Union

from pydantic import BaseModel, Field


class ToolCall(BaseModel):
    """A tool invocation requested by the model."""

    name: str = Field(description="Name of the tool to invoke")
    args: Dict[str, Any] = Field(
        default_factory=dict, description="Arguments for the tool"
    )
    id: str = Field(description="Invocation id the result must answer")


class SystemTurn(BaseModel):
    """Fixed instruction text placed ahead of a conversation."""

    role: Literal["system"] = "system"
    content: str


class HumanTurn(BaseModel):
    """A user (or delegating agent) message."""

    role: Literal["human"] = "human"
    content: str


class ModelTurn(BaseModel):
    """A model response: free text, tool calls, or both."""

    role: Literal["ai"] = "ai"
    content: str = ""
    tool_calls: List[ToolCall] = Field(default_factory=list)


class ToolResultTurn(BaseModel):
    """The answer to a single tool call."""

    role: Literal["tool"] = "tool"
    tool_call_id: str
    name: str
    content: str


Turn = Union[SystemTurn, HumanTurn, ModelTurn, ToolResultTurn]

_BUFFER_PREFIXES = {
    "system": "System",
    "human": "Human",
    "ai": "AI",
    "tool": "Tool",
}


def filter_turns(turns: Iterable[Turn], roles: Sequence[str]) -> List[Turn]:
    """Return the turns whose role is in ``roles``, preserving order."""
    return [turn for turn in turns if turn.role in roles]


def get_buffer_string(turns: Iterable[Turn]) -> str:
    """
    Render a conversation as plain text, one ``Role: content`` line per turn.

    Used to hand a whole conversation to a single-prompt model call.
    """
    return "\n".join(
        f"{_BUFFER_PREFIXES[turn.role]}: {turn.content}" for turn in turns
    )


def last_tool_calls(turns: Sequence[Turn]) -> List[ToolCall]:
    """Tool calls carried by the most recent turn (empty if none)."""
    if not turns:
        return []
    last = turns[-1]
    if isinstance(last, ModelTurn):
        return list(last.tool_calls)
    return []
