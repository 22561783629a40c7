"""
Data Models for Graph Generation
"""
from dataclasses import dataclass
from typing import Dict, Any, Optional

#: Number of random target draws per node for each unit of complexity.
SAMPLES_PER_COMPLEXITY: int = 10

SCALE_PRESETS: Dict[str, Dict[str, int]] = {
    "tiny":   {"nodes": 5,   "complexity": 1},
    "small":  {"nodes": 15,  "complexity": 1},
    "medium": {"nodes": 50,  "complexity": 2},
    "large":  {"nodes": 150, "complexity": 3},
    "xlarge": {"nodes": 500, "complexity": 5},
}


def _require_non_negative_int(name: str, value: Any) -> None:
    # bool is an int subclass but never a meaningful count
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name} must be an integer, got {type(value).__name__}: {value!r}")
    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")


@dataclass
class GraphConfig:
    """Configuration for element generation."""
    number_of_nodes: int = 50
    complexity: int = 2
    seed: Optional[int] = 42

    def __post_init__(self) -> None:
        _require_non_negative_int("number_of_nodes", self.number_of_nodes)
        _require_non_negative_int("complexity", self.complexity)
        if self.seed is not None and (isinstance(self.seed, bool) or not isinstance(self.seed, int)):
            raise ValueError(f"seed must be an integer or None, got {self.seed!r}")

    @property
    def samples_per_node(self) -> int:
        return self.complexity * SAMPLES_PER_COMPLEXITY

    @classmethod
    def from_scale(cls, scale: str, seed: Optional[int] = 42) -> "GraphConfig":
        if scale not in SCALE_PRESETS:
            raise ValueError(
                f"Unknown scale '{scale}'. Expected one of: {', '.join(SCALE_PRESETS)}"
            )
        preset = SCALE_PRESETS[scale]
        return cls(
            number_of_nodes=preset["nodes"],
            complexity=preset["complexity"],
            seed=seed,
        )

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GraphConfig":
        """
        Build a config from a parsed mapping.

        Accepts either a top-level ``graph`` section or a flat mapping. A
        ``scale`` key selects a preset; explicit ``nodes``/``complexity``
        values override it.
        """
        if not isinstance(data, dict):
            raise ValueError(f"Graph configuration must be a mapping, got {type(data).__name__}")
        graph_data = data.get("graph", data)
        if not isinstance(graph_data, dict):
            raise ValueError(
                f"Graph section must be a mapping, got {type(graph_data).__name__}"
            )
        seed = graph_data.get("seed", 42)

        if "scale" in graph_data:
            base = cls.from_scale(graph_data["scale"], seed)
        else:
            base = cls(seed=seed)

        return cls(
            number_of_nodes=graph_data.get("nodes", base.number_of_nodes),
            complexity=graph_data.get("complexity", base.complexity),
            seed=seed,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "nodes": self.number_of_nodes,
            "complexity": self.complexity,
            "seed": self.seed,
        }
