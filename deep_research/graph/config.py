"""
Configuration for the full deep research graph.

Composes the per-agent configurations and applies overrides from the
environment (loaded from .env) and from callers.
"""

import os
from dataclasses import dataclass, field
from typing import Optional

from dotenv import load_dotenv

from deep_research.researcher.graph.config import ResearcherGraphConfig
from deep_research.scoping.config import ScopingConfig
from deep_research.supervisor.graph.config import SupervisorGraphConfig

load_dotenv()


@dataclass
class DeepResearchConfig:
    """
    Configuration for a research session.

    Attributes:
        report_model: Model used to write the final report
        scoping: Clarification and brief configuration
        supervisor: Supervisor configuration
        researcher: Researcher configuration
    """

    report_model: str = "gpt-4.1"
    scoping: ScopingConfig = field(default_factory=ScopingConfig)
    supervisor: SupervisorGraphConfig = field(default_factory=SupervisorGraphConfig)
    researcher: ResearcherGraphConfig = field(default_factory=ResearcherGraphConfig)


def _env_str(name: str) -> Optional[str]:
    value = os.environ.get(name)
    return value.strip() if value and value.strip() else None


def _env_int(name: str) -> Optional[int]:
    value = _env_str(name)
    return int(value) if value is not None else None


def _env_float(name: str) -> Optional[float]:
    value = _env_str(name)
    return float(value) if value is not None else None


def _env_bool(name: str) -> Optional[bool]:
    value = _env_str(name)
    if value is None:
        return None
    return value.lower() in ("1", "true", "yes", "on")


def _first(*values):
    for value in values:
        if value is not None:
            return value
    return None


def get_config(
    main_model: Optional[str] = None,
    summarization_model: Optional[str] = None,
    scoping_model: Optional[str] = None,
    scoping_temperature: Optional[float] = None,
    allow_clarification: Optional[bool] = None,
    max_search_results: Optional[int] = None,
    max_concurrent_research_units: Optional[int] = None,
    max_researcher_iterations: Optional[int] = None,
) -> DeepResearchConfig:
    """
    Create a configuration with optional overrides.

    Explicit arguments win over environment variables, which win over the
    dataclass defaults. Recognised variables: MAIN_MODEL,
    SUMMARIZATION_MODEL, SCOPING_MODEL, SCOPING_MODEL_TEMPERATURE,
    ALLOW_CLARIFICATION, TAVILY_MAX_RESULTS, MAX_CONCURRENT_RESEARCH_UNITS,
    MAX_RESEARCHER_ITERATIONS.

    Returns:
        DeepResearchConfig with overrides applied
    """
    defaults = DeepResearchConfig()

    main_model = _first(main_model, _env_str("MAIN_MODEL"), defaults.report_model)

    scoping = ScopingConfig(
        model=_first(scoping_model, _env_str("SCOPING_MODEL"), defaults.scoping.model),
        temperature=_first(
            scoping_temperature,
            _env_float("SCOPING_MODEL_TEMPERATURE"),
            defaults.scoping.temperature,
        ),
        allow_clarification=_first(
            allow_clarification,
            _env_bool("ALLOW_CLARIFICATION"),
            defaults.scoping.allow_clarification,
        ),
    )

    supervisor = SupervisorGraphConfig(
        model=main_model,
        max_concurrent_research_units=_first(
            max_concurrent_research_units,
            _env_int("MAX_CONCURRENT_RESEARCH_UNITS"),
            defaults.supervisor.max_concurrent_research_units,
        ),
        max_researcher_iterations=_first(
            max_researcher_iterations,
            _env_int("MAX_RESEARCHER_ITERATIONS"),
            defaults.supervisor.max_researcher_iterations,
        ),
    )

    researcher = ResearcherGraphConfig(
        model=main_model,
        summarization_model=_first(
            summarization_model,
            _env_str("SUMMARIZATION_MODEL"),
            defaults.researcher.summarization_model,
        ),
        max_search_results=_first(
            max_search_results,
            _env_int("TAVILY_MAX_RESULTS"),
            defaults.researcher.max_search_results,
        ),
    )

    return DeepResearchConfig(
        report_model=main_model,
        scoping=scoping,
        supervisor=supervisor,
        researcher=researcher,
    )
