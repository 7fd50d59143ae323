"""
Prompt builders.

Fill the templates with runtime values. Pure text formatting.
"""

from datetime import datetime
from typing import Optional

from deep_research.prompts.templates import (
    CLARIFY_WITH_USER_TEMPLATE,
    RESEARCH_BRIEF_TEMPLATE,
    RESEARCH_AGENT_TEMPLATE,
    COMPRESS_RESEARCH_SYSTEM_TEMPLATE,
    COMPRESS_RESEARCH_HUMAN_TEMPLATE,
    SUMMARIZE_WEBPAGE_TEMPLATE,
    LEAD_RESEARCHER_TEMPLATE,
    FINAL_REPORT_TEMPLATE,
)


def get_today(now: Optional[datetime] = None) -> str:
    """Today's date as e.g. ``Sun Oct 18, 2026``."""
    now = now or datetime.now()
    return f"{now:%a} {now:%b} {now.day}, {now.year}"


def build_clarify_prompt(messages: str, date: Optional[str] = None) -> str:
    return CLARIFY_WITH_USER_TEMPLATE.format(
        messages=messages, date=date or get_today()
    )


def build_research_brief_prompt(messages: str, date: Optional[str] = None) -> str:
    return RESEARCH_BRIEF_TEMPLATE.format(messages=messages, date=date or get_today())


def build_research_agent_prompt(date: Optional[str] = None) -> str:
    return RESEARCH_AGENT_TEMPLATE.format(date=date or get_today())


def build_compress_system_prompt(date: Optional[str] = None) -> str:
    return COMPRESS_RESEARCH_SYSTEM_TEMPLATE.format(date=date or get_today())


def build_compress_human_prompt(research_topic: str) -> str:
    return COMPRESS_RESEARCH_HUMAN_TEMPLATE.format(research_topic=research_topic)


def build_summarize_webpage_prompt(
    webpage_content: str, date: Optional[str] = None
) -> str:
    return SUMMARIZE_WEBPAGE_TEMPLATE.format(
        webpage_content=webpage_content, date=date or get_today()
    )


def build_lead_researcher_prompt(
    max_concurrent_research_units: int,
    max_researcher_iterations: int,
    date: Optional[str] = None,
) -> str:
    """
    Build the supervisor's system prompt.

    Args:
        max_concurrent_research_units: Parallel sub-agents allowed per iteration
        max_researcher_iterations: Supervisor decision cycles before forced stop
        date: Date string (defaults to today)
    """
    return LEAD_RESEARCHER_TEMPLATE.format(
        date=date or get_today(),
        max_concurrent_research_units=max_concurrent_research_units,
        max_researcher_iterations=max_researcher_iterations,
    )


def build_final_report_prompt(
    research_brief: str, findings: str, date: Optional[str] = None
) -> str:
    return FINAL_REPORT_TEMPLATE.format(
        research_brief=research_brief, findings=findings, date=date or get_today()
    )
