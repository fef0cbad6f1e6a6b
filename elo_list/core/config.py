"""
Configuration for the Elo list engine.
"""

import os
from dataclasses import dataclass


@dataclass(frozen=True)
class EloListConfig:
    """
    Immutable settings shared by the parser, estimator and rating updater.

    Args:
        default_strength: Strength of an item with no relations
        incubation_limit: Number of relations an incubating item may hold
            before it collapses into a single equality
        k_factor: K-factor for Elo calculations
        scale: Rating difference that multiplies the odds by ten
        code_name: Name of the fenced block that holds an Elo list
        show_as_pre: Whether hosts should echo the raw list text
        show_as_table: Whether hosts should render a table of items
    """

    default_strength: int = 600
    incubation_limit: int = 4
    k_factor: float = 32.0
    scale: float = 400.0
    code_name: str = "elolist"
    show_as_pre: bool = True
    show_as_table: bool = False

    def __post_init__(self):
        if self.incubation_limit < 1:
            raise ValueError("incubation_limit must be at least 1")

        if self.k_factor < 0:
            raise ValueError("k_factor must be non-negative")

        if self.scale <= 0:
            raise ValueError("scale must be positive")

    @classmethod
    def from_env(cls) -> "EloListConfig":
        """Create config from environment variables."""
        return cls(
            default_strength=int(os.environ.get("ELO_LIST_DEFAULT_STRENGTH", "600")),
            incubation_limit=int(os.environ.get("ELO_LIST_INCUBATION_LIMIT", "4")),
            k_factor=float(os.environ.get("ELO_LIST_K_FACTOR", "32")),
        )


# Default configuration
DEFAULT_CONFIG = EloListConfig()
