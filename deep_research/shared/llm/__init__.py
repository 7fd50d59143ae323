"""LLM service interface and OpenAI implementation."""

from deep_research.shared.llm.client import (
    LLMService,
    LLMResponseError,
    OpenAIChatService,
    create_openai_client,
    to_openai_messages,
)

__all__ = [
    "LLMService",
    "LLMResponseError",
    "OpenAIChatService",
    "create_openai_client",
    "to_openai_messages",
]
