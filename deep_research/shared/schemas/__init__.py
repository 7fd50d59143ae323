"""Common message schemas shared by all agents."""

from deep_research.shared.schemas.messages import (
    ToolCall,
    SystemTurn,
    HumanTurn,
    ModelTurn,
    ToolResultTurn,
    Turn,
    filter_turns,
    get_buffer_string,
    last_tool_calls,
)

__all__ = [
    "ToolCall",
    "SystemTurn",
    "HumanTurn",
    "ModelTurn",
    "ToolResultTurn",
    "Turn",
    "filter_turns",
    "get_buffer_string",
    "last_tool_calls",
]
