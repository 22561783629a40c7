"""
Application Settings

Environment configuration for graph generation.
"""

import os
from dataclasses import dataclass
from typing import Optional


@dataclass
class Settings:
    """Application settings from environment."""

    seed: Optional[int] = 42
    scale: str = "small"
    log_level: str = "WARNING"
    output_dir: str = "output"

    @classmethod
    def from_env(cls) -> "Settings":
        """Load settings from environment variables."""
        raw_seed = os.getenv("GRAPH_ELEMENTS_SEED", "42")
        try:
            seed = int(raw_seed) if raw_seed.strip() else None
        except ValueError as e:
            raise ValueError(f"GRAPH_ELEMENTS_SEED must be an integer, got {raw_seed!r}") from e
        return cls(
            seed=seed,
            scale=os.getenv("GRAPH_ELEMENTS_SCALE", "small"),
            log_level=os.getenv("GRAPH_ELEMENTS_LOG_LEVEL", "WARNING").upper(),
            output_dir=os.getenv("GRAPH_ELEMENTS_OUTPUT_DIR", "output"),
        )
