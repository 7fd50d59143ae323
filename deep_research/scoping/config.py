"""
Configuration for the scoping agent.
"""

from dataclasses import dataclass


@dataclass
class ScopingConfig:
    """
    Configuration for clarification and brief generation.

    Attributes:
        model: Model used for both structured scoping calls
        temperature: Sampling temperature for scoping calls
        allow_clarification: When False, never ask the user a question
    """

    model: str = "gpt-4.1"
    temperature: float = 0.0
    allow_clarification: bool = True


# Default configuration instance
DEFAULT_CONFIG = ScopingConfig()
