"""
Core Value Objects

Element descriptors emitted by the generator, in the shape graph-rendering
libraries (Cytoscape-style element definitions) accept.
"""
from __future__ import annotations
import re
from dataclasses import dataclass
from typing import Dict, Any, Tuple

NODES_GROUP = "nodes"
EDGES_GROUP = "edges"

_EDGE_ID_PATTERN = re.compile(r"e(-?\d+)to(-?\d+)")


def make_edge_id(source: int, target: int) -> str:
    """Build the edge identifier ``e<source>to<target>``."""
    return f"e{source}to{target}"


def parse_edge_id(edge_id: str) -> Tuple[int, int]:
    """
    Parse an edge identifier back into its (source, target) pair.

    Raises:
        ValueError: If the identifier does not follow ``e<source>to<target>``.
    """
    match = _EDGE_ID_PATTERN.fullmatch(edge_id)
    if match is None:
        raise ValueError(f"Malformed edge id: {edge_id!r}")
    return int(match.group(1)), int(match.group(2))


@dataclass(frozen=True)
class NodeElement:
    """A graph vertex, identified by its stringified index."""
    id: str

    @classmethod
    def from_index(cls, index: int) -> "NodeElement":
        return cls(id=str(index))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "group": NODES_GROUP,
            "data": {"id": self.id},
        }


@dataclass(frozen=True)
class EdgeElement:
    """An undirected connection between two vertices."""
    source: int
    target: int
    id: str

    @classmethod
    def from_id(cls, edge_id: str) -> "EdgeElement":
        source, target = parse_edge_id(edge_id)
        return cls(source=source, target=target, id=edge_id)

    @property
    def pair(self) -> frozenset:
        """Unordered endpoint key; a self-loop collapses to one member."""
        return frozenset((self.source, self.target))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "group": EDGES_GROUP,
            "data": {
                "source": self.source,
                "target": self.target,
                "id": self.id,
            },
        }
