"""
Schemas for the note pipeline.

Structured output for webpage summarization and the deduplicated
search result entry.
"""

from typing import Dict, Optional

from pydantic import BaseModel, Field


class Summary(BaseModel):
    """Structured summary of a single webpage."""

    summary: str = Field(description="Concise summary of the webpage content")
    key_excerpts: str = Field(
        description="Important quotes and excerpts from the content"
    )


class DedupedResult(BaseModel):
    """A search result kept after URL deduplication."""

    title: str = ""
    content: str = ""
    raw_content: Optional[str] = None


# Keyed by URL, insertion order is first-seen order.
SearchResultSet = Dict[str, DedupedResult]
