"""
Test Configuration and Fixtures
================================

Shared pytest fixtures for testing graph_elements.

Usage:
    pytest tests/                    # Run all tests
    pytest tests/ -v                 # Verbose output
    pytest tests/ --quick            # Skip slow tests
"""

import pytest
from pathlib import Path
from typing import List

import sys
sys.path.insert(0, str(Path(__file__).parent.parent))

from graph_elements.generation import IRandomSource


# =============================================================================
# Custom Markers
# =============================================================================

def pytest_configure(config):
    """Register custom markers"""
    config.addinivalue_line("markers", "slow: marks tests as slow")


def pytest_addoption(parser):
    """Add custom command line options"""
    parser.addoption(
        "--quick",
        action="store_true",
        default=False,
        help="Skip slow tests",
    )


def pytest_collection_modifyitems(config, items):
    """Skip slow tests if --quick is specified"""
    if config.getoption("--quick"):
        skip_slow = pytest.mark.skip(reason="Skipped with --quick")
        for item in items:
            if "slow" in item.keywords:
                item.add_marker(skip_slow)


# =============================================================================
# Random Source Fixtures
# =============================================================================

class ScriptedRandomSource(IRandomSource):
    """Returns pre-recorded values in order and records requested bounds."""

    def __init__(self, values: List[int]) -> None:
        self.values = list(values)
        self.bounds: List[int] = []

    def next_int(self, bound: int) -> int:
        self.bounds.append(bound)
        return self.values.pop(0)


@pytest.fixture
def scripted_source():
    """Factory for scripted random sources."""
    return ScriptedRandomSource


@pytest.fixture
def sample_adjacency() -> List[List[int]]:
    """Adjacency list with one reverse duplicate per pair."""
    return [[1, 2], [0, 2], [1]]


@pytest.fixture
def sample_elements():
    """Small element collection: three nodes, two edges"""
    return [
        {"group": "nodes", "data": {"id": "0"}},
        {"group": "nodes", "data": {"id": "1"}},
        {"group": "nodes", "data": {"id": "2"}},
        {"group": "edges", "data": {"source": 0, "target": 1, "id": "e0to1"}},
        {"group": "edges", "data": {"source": 2, "target": 2, "id": "e2to2"}},
    ]
