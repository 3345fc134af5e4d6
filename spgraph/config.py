"""Configuration classes for spgraph components."""

from dataclasses import dataclass


@dataclass
class SolverConfig:
    """Configuration for shortest-path queries."""

    # Stop once the target is popped with its final distance. The default
    # drains the whole frontier.
    stop_at_target: bool = False

    # Re-check the returned path against the graph before returning it.
    validate_result: bool = False


# Global configuration instance
SOLVER_CONFIG = SolverConfig()
