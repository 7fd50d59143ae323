"""
Graph configuration for the research supervisor.
"""

from dataclasses import dataclass


@dataclass
class SupervisorGraphConfig:
    """
    Configuration for the supervisor graph.

    Attributes:
        model: Model used for supervisor decisions
        max_concurrent_research_units: Researchers allowed to run at once
            (also advertised to the model as the per-iteration fan-out)
        max_researcher_iterations: Supervisor decision cycles before the
            phase is forced to end
    """

    model: str = "gpt-4.1"
    max_concurrent_research_units: int = 3
    max_researcher_iterations: int = 6

    def __post_init__(self):
        if self.max_concurrent_research_units < 1:
            raise ValueError(
                f"max_concurrent_research_units must be at least 1, "
                f"got {self.max_concurrent_research_units}"
            )

    @property
    def recursion_limit(self) -> int:
        # Two graph steps per decision cycle, plus headroom for entry/exit
        return 2 * self.max_researcher_iterations + 5


# Default configuration instance
DEFAULT_CONFIG = SupervisorGraphConfig()
