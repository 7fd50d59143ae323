"""Tool specifications and name-based dispatch."""

from deep_research.shared.tools.registry import (
    ToolSpec,
    ToolRegistry,
    tool_not_found_message,
    tool_error_message,
)

__all__ = [
    "ToolSpec",
    "ToolRegistry",
    "tool_not_found_message",
    "tool_error_message",
]
