"""
Core Package
"""
from .models import (
    NODES_GROUP,
    EDGES_GROUP,
    NodeElement,
    EdgeElement,
    make_edge_id,
    parse_edge_id,
)

__all__ = [
    "NODES_GROUP",
    "EDGES_GROUP",
    "NodeElement",
    "EdgeElement",
    "make_edge_id",
    "parse_edge_id",
]
