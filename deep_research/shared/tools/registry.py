"""
Tool definitions and dispatch.

A tool is a name, a description, a pydantic argument schema and an async
handler. The registry maps model-supplied tool names to handlers and turns
every call, including unknown names and failing handlers, into exactly one
ToolResultTurn.
"""

import asyncio
import logging
from dataclasses import dataclass
from typing import Awaitable, Callable, Dict, Iterable, List, Optional, Type

from pydantic import BaseModel

from deep_research.shared.schemas.messages import ToolCall, ToolResultTurn


logger = logging.getLogger(__name__)


ToolHandler = Callable[[BaseModel], Awaitable[str]]


@dataclass(frozen=True)
class ToolSpec:
    """
    A model-invocable tool.

    Attributes:
        name: Name the model uses to invoke the tool
        description: Description shown to the model
        args_schema: Pydantic model describing (and validating) the arguments
        handler: Async callable receiving the validated arguments. ``None``
            for tools whose calls are interpreted by the caller rather than
            executed (e.g. the supervisor's delegation tool).
    """

    name: str
    description: str
    args_schema: Type[BaseModel]
    handler: Optional[ToolHandler] = None

    def to_openai(self) -> dict:
        """Render as an OpenAI function-tool definition."""
        parameters = self.args_schema.model_json_schema()
        parameters.pop("title", None)
        parameters.setdefault("properties", {})
        return {
            "type": "function",
            "function": {
                "name": self.name,
                "description": self.description,
                "parameters": parameters,
            },
        }


def tool_not_found_message(name: str) -> str:
    return f"Error: tool '{name}' not found."


def tool_error_message(name: str, error: Exception) -> str:
    return f"Error executing tool '{name}': {error}"


class ToolRegistry:
    """Lookup table from tool name to ToolSpec."""

    def __init__(self, tools: Iterable[ToolSpec]):
        self._tools: Dict[str, ToolSpec] = {}
        for tool in tools:
            self._tools[tool.name] = tool

    @property
    def specs(self) -> List[ToolSpec]:
        return list(self._tools.values())

    def get(self, name: str) -> Optional[ToolSpec]:
        return self._tools.get(name)

    async def execute(self, call: ToolCall) -> ToolResultTurn:
        """
        Execute one tool call.

        Never raises: an unknown tool name or a failing handler yields an
        error ToolResultTurn so the call id is still answered.

        Args:
            call: The tool call requested by the model

        Returns:
            ToolResultTurn answering ``call.id``
        """
        tool = self._tools.get(call.name)

        if tool is None or tool.handler is None:
            logger.warning(f"Tool '{call.name}' not found (call_id={call.id})")
            content = tool_not_found_message(call.name)
        else:
            try:
                args = tool.args_schema.model_validate(call.args)
                content = str(await tool.handler(args))
            except Exception as e:
                logger.exception(f"Error executing tool {call.name}: {e}")
                content = tool_error_message(call.name, e)

        return ToolResultTurn(tool_call_id=call.id, name=call.name, content=content)

    async def execute_all(self, calls: Iterable[ToolCall]) -> List[ToolResultTurn]:
        """
        Execute a batch of tool calls concurrently.

        Returns one result per call, in call order.
        """
        return list(await asyncio.gather(*(self.execute(call) for call in calls)))
