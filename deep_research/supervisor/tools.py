"""
Supervisor tools.

ConductResearch and ResearchComplete carry no handler: the supervisor's
tools node interprets them directly. think_tool is shared with the
researcher.
"""

from deep_research.researcher.tools import THINK_TOOL_NAME, create_think_tool
from deep_research.shared.tools.registry import ToolRegistry, ToolSpec
from deep_research.supervisor.schemas import ConductResearch, ResearchComplete


CONDUCT_RESEARCH_TOOL_NAME = "ConductResearch"
RESEARCH_COMPLETE_TOOL_NAME = "ResearchComplete"

__all__ = [
    "CONDUCT_RESEARCH_TOOL_NAME",
    "RESEARCH_COMPLETE_TOOL_NAME",
    "THINK_TOOL_NAME",
    "create_supervisor_tools",
]


def create_supervisor_tools() -> ToolRegistry:
    """Registry of the tools bound to the supervisor model."""
    return ToolRegistry(
        [
            ToolSpec(
                name=CONDUCT_RESEARCH_TOOL_NAME,
                description=(
                    "Tool for delegating a research task to a specialized sub-agent."
                ),
                args_schema=ConductResearch,
            ),
            ToolSpec(
                name=RESEARCH_COMPLETE_TOOL_NAME,
                description="Tool for indicating that the research process is complete.",
                args_schema=ResearchComplete,
            ),
            create_think_tool(),
        ]
    )
