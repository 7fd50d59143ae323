"""
Top-level deep research graph.

Composes the scoping, supervisor and report steps into one pipeline:
    conversation -> clarify -> brief -> supervisor research -> report
"""

from deep_research.graph.build import create_deep_research_graph
from deep_research.graph.config import DeepResearchConfig, get_config

__all__ = ["create_deep_research_graph", "DeepResearchConfig", "get_config"]
