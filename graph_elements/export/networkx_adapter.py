"""
NetworkX Adapter

Converts element collections into an undirected ``networkx.Graph`` for
consumers that work on graph objects instead of descriptor lists.
"""

import logging
from typing import Any, Dict, Iterable

import networkx as nx

from graph_elements.core.models import NODES_GROUP, EDGES_GROUP

logger = logging.getLogger(__name__)


def to_networkx(elements: Iterable[Dict[str, Any]]) -> nx.Graph:
    """
    Build an undirected graph from element descriptors.

    Node ids are kept as strings; edge endpoints are stringified to match
    them. The edge ``id`` is stored as an edge attribute.

    Raises:
        ValueError: If an element has an unknown ``group``.
    """
    G = nx.Graph()
    for element in elements:
        group = element.get("group")
        data = element.get("data", {})
        if group == NODES_GROUP:
            G.add_node(data["id"])
        elif group == EDGES_GROUP:
            G.add_edge(str(data["source"]), str(data["target"]), id=data["id"])
        else:
            raise ValueError(f"Unknown element group: {group!r}")

    logger.debug(f"Built NetworkX graph: {G.number_of_nodes()} nodes, {G.number_of_edges()} edges")
    return G
