"""
Graph Generation Package
"""
from .service import GenerationService, generate_graph, create_graph, load_config
from .models import GraphConfig, SCALE_PRESETS, SAMPLES_PER_COMPLEXITY
from .generator import GraphElementGenerator, create_graph_elements_collection
from .random_source import IRandomSource, SeededRandomSource

__all__ = [
    "GenerationService",
    "generate_graph",
    "create_graph",
    "load_config",
    "GraphConfig",
    "SCALE_PRESETS",
    "SAMPLES_PER_COMPLEXITY",
    "GraphElementGenerator",
    "create_graph_elements_collection",
    "IRandomSource",
    "SeededRandomSource",
]
