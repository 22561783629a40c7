"""
graph_elements

Synthetic graph element generation for graph-rendering front ends.
"""
from graph_elements.core import NodeElement, EdgeElement, make_edge_id, parse_edge_id
from graph_elements.generation import (
    GenerationService,
    GraphConfig,
    IRandomSource,
    SeededRandomSource,
    create_graph,
    generate_graph,
    load_config,
)
from graph_elements.export import export_elements_json, load_elements_json, to_networkx
from graph_elements.config import Settings

__version__ = "1.0.0"

__all__ = [
    "NodeElement",
    "EdgeElement",
    "make_edge_id",
    "parse_edge_id",
    "GenerationService",
    "GraphConfig",
    "IRandomSource",
    "SeededRandomSource",
    "create_graph",
    "generate_graph",
    "load_config",
    "export_elements_json",
    "load_elements_json",
    "to_networkx",
    "Settings",
]
