"""
Graph Element Generator

Builds a random adjacency structure and turns it into node and edge
element descriptors.
"""
import logging
from typing import Dict, Any, List, Optional

from graph_elements.core.models import (
    NodeElement,
    EdgeElement,
    make_edge_id,
)
from .models import GraphConfig
from .random_source import IRandomSource, SeededRandomSource

logger = logging.getLogger(__name__)


class GraphElementGenerator:
    """Generates node and edge descriptors for a random undirected graph."""

    def __init__(self, config: GraphConfig, random_source: Optional[IRandomSource] = None) -> None:
        self.config = config
        self.random_source = random_source or SeededRandomSource(config.seed)

    def generate_adjacency_list(self) -> List[List[int]]:
        """
        Draw ``complexity * 10`` random targets for every node.

        Targets are deduplicated per source, keeping first-draw order.
        Self references are kept.
        """
        n = self.config.number_of_nodes
        samples = self.config.samples_per_node
        adjacency: List[List[int]] = []
        for _ in range(n):
            draws = [self.random_source.next_int(n) for _ in range(samples)]
            adjacency.append(list(dict.fromkeys(draws)))
        return adjacency

    @staticmethod
    def create_nodes(number_of_nodes: int) -> List[NodeElement]:
        return [NodeElement.from_index(i) for i in range(number_of_nodes)]

    @staticmethod
    def create_edges(adjacency_list: List[List[int]]) -> List[EdgeElement]:
        """
        Walk the adjacency list and keep one edge per unordered pair.

        Sources are visited in index order and targets in stored order; the
        first direction seen for a pair is the one emitted.
        """
        claimed: Dict[frozenset, EdgeElement] = {}
        for source, targets in enumerate(adjacency_list):
            for target in targets:
                edge = EdgeElement.from_id(make_edge_id(source, target))
                claimed.setdefault(edge.pair, edge)
        return list(claimed.values())

    def generate(self) -> List[Dict[str, Any]]:
        """Generate the full element collection: nodes first, then edges."""
        adjacency = self.generate_adjacency_list()
        nodes = self.create_nodes(self.config.number_of_nodes)
        edges = self.create_edges(adjacency)

        logger.debug(
            f"Generated {len(nodes)} nodes and {len(edges)} edges "
            f"(complexity={self.config.complexity})"
        )
        return [n.to_dict() for n in nodes] + [e.to_dict() for e in edges]


def create_graph_elements_collection(
    number_of_nodes: int,
    complexity: int,
    random_source: Optional[IRandomSource] = None,
    seed: Optional[int] = None,
) -> List[Dict[str, Any]]:
    """Build nodes and edges for a graph of the given size and complexity."""
    config = GraphConfig(number_of_nodes=number_of_nodes, complexity=complexity, seed=seed)
    return GraphElementGenerator(config, random_source).generate()
