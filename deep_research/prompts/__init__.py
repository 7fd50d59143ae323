"""Prompt templates and builders for the research agents."""

from deep_research.prompts.builders import (
    get_today,
    build_clarify_prompt,
    build_research_brief_prompt,
    build_research_agent_prompt,
    build_compress_system_prompt,
    build_compress_human_prompt,
    build_summarize_webpage_prompt,
    build_lead_researcher_prompt,
    build_final_report_prompt,
)

__all__ = [
    "get_today",
    "build_clarify_prompt",
    "build_research_brief_prompt",
    "build_research_agent_prompt",
    "build_compress_system_prompt",
    "build_compress_human_prompt",
    "build_summarize_webpage_prompt",
    "build_lead_researcher_prompt",
    "build_final_report_prompt",
]
