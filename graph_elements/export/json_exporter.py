"""
JSON Element Exporter

Writes and reads element collections as JSON files.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Union

logger = logging.getLogger(__name__)


class JsonElementExporter:
    """Reads and writes element collections as JSON."""

    def __init__(self, indent: int = 2) -> None:
        self.indent = indent

    def export_json(self, data: Union[List[Dict[str, Any]], Dict[str, Any]], output_path: Union[str, Path]) -> Path:
        """
        Export an element list, or a metadata envelope, to JSON.

        Args:
            data: Element list or ``{"metadata": ..., "elements": [...]}``
            output_path: Path to output file

        Returns:
            Path to exported file
        """
        path = Path(output_path)
        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, 'w') as f:
            json.dump(data, f, indent=self.indent)

        logger.info(f"Elements exported to: {path}")
        return path

    def load_json(self, input_path: Union[str, Path]) -> List[Dict[str, Any]]:
        """Load an element list from either supported JSON layout."""
        with open(input_path, 'r') as f:
            data = json.load(f)

        if isinstance(data, list):
            return data
        if isinstance(data, dict) and isinstance(data.get("elements"), list):
            return data["elements"]
        raise ValueError(f"No element list found in {input_path}")


def export_elements_json(data: Union[List[Dict[str, Any]], Dict[str, Any]], output_path: Union[str, Path]) -> Path:
    return JsonElementExporter().export_json(data, output_path)


def load_elements_json(input_path: Union[str, Path]) -> List[Dict[str, Any]]:
    return JsonElementExporter().load_json(input_path)
