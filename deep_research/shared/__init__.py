"""
Shared infrastructure for all agents.

Modules:
- llm: Language model service (OpenAI implementation)
- search: Web search service (Tavily implementation)
- tools: Tool specs and name-based dispatch
- schemas: Conversation turn types
- logging: Structured JSON logging
- services: Service handle bundle
"""

from deep_research.shared.services import Services, create_default_services
from deep_research.shared.logging.config import setup_logging, log_state_transition

__all__ = [
    "Services",
    "create_default_services",
    "setup_logging",
    "log_state_transition",
]
