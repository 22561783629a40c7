"""
Graph Generation Service
"""
import logging
from typing import Dict, Any, List, Optional
from pathlib import Path
import yaml

from graph_elements.core.models import NODES_GROUP, EDGES_GROUP
from .models import GraphConfig
from .generator import GraphElementGenerator, create_graph_elements_collection
from .random_source import IRandomSource, SeededRandomSource

logger = logging.getLogger(__name__)


class GenerationService:
    """Service for generating graph element collections."""

    def __init__(
        self,
        scale: str = "small",
        seed: Optional[int] = 42,
        config: Optional[GraphConfig] = None,
        random_source: Optional[IRandomSource] = None,
    ) -> None:
        if config is not None:
            self.config = config
        else:
            self.config = GraphConfig.from_scale(scale, seed)

        self.random_source = random_source or SeededRandomSource(self.config.seed)
        self.generator = GraphElementGenerator(self.config, self.random_source)

    def generate(self) -> List[Dict[str, Any]]:
        """Generate the element collection."""
        logger.info(
            f"Generating graph: nodes={self.config.number_of_nodes}, "
            f"complexity={self.config.complexity}, seed={self.config.seed}"
        )
        return self.generator.generate()

    def generate_with_metadata(self) -> Dict[str, Any]:
        """Generate the element collection wrapped with its metadata."""
        elements = self.generate()
        return {
            "metadata": {
                **self.config.to_dict(),
                "node_count": sum(1 for e in elements if e["group"] == NODES_GROUP),
                "edge_count": sum(1 for e in elements if e["group"] == EDGES_GROUP),
            },
            "elements": elements,
        }


def load_config(path: Path) -> GraphConfig:
    """Load graph configuration from a YAML file."""
    with open(path, "r") as f:
        data = yaml.safe_load(f)
    if data is None:
        raise ValueError(f"Configuration file is empty: {path}")
    return GraphConfig.from_dict(data)


def generate_graph(scale: str = "small", **kwargs: Any) -> List[Dict[str, Any]]:
    """Convenience function to generate a graph from a scale preset or config."""
    config = kwargs.get('config')
    seed = kwargs.get('seed', 42)
    random_source = kwargs.get('random_source')

    service = GenerationService(scale=scale, seed=seed, config=config, random_source=random_source)
    return service.generate()


def create_graph(
    number_of_nodes: int,
    complexity: int,
    random_source: Optional[IRandomSource] = None,
    seed: Optional[int] = None,
) -> List[Dict[str, Any]]:
    """
    Create the elements of a graph.

    Args:
        number_of_nodes: Number of nodes the graph will have
        complexity: Density factor; each node draws ``complexity * 10``
            random targets before deduplication
        random_source: Optional source of randomness, e.g. a seeded one in tests
        seed: Seed for the default random source when none is injected

    Returns:
        All node descriptors in index order followed by all edge descriptors
    """
    return create_graph_elements_collection(number_of_nodes, complexity, random_source, seed)
