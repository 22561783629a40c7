"""
Export Adapters
"""
from .json_exporter import JsonElementExporter, export_elements_json, load_elements_json
from .networkx_adapter import to_networkx

__all__ = [
    "JsonElementExporter",
    "export_elements_json",
    "load_elements_json",
    "to_networkx",
]
