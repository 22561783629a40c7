"""
CLI Smoke Tests for bin/generate_graph.py
"""

import json
import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
sys.path.append(str(PROJECT_ROOT / "bin"))

import generate_graph  # noqa: E402

from graph_elements.generation import SCALE_PRESETS  # noqa: E402


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for var in ("GRAPH_ELEMENTS_SEED", "GRAPH_ELEMENTS_SCALE",
                "GRAPH_ELEMENTS_LOG_LEVEL", "GRAPH_ELEMENTS_OUTPUT_DIR"):
        monkeypatch.delenv(var, raising=False)


class TestGenerateGraphCLI:

    def test_scale(self, tmp_path):
        output = tmp_path / "graph.json"
        ret = generate_graph.main(["--scale", "tiny", "--seed", "1", "--output", str(output)])

        assert ret == 0
        elements = json.loads(output.read_text())
        nodes = [e for e in elements if e["group"] == "nodes"]
        assert len(nodes) == SCALE_PRESETS["tiny"]["nodes"]

    def test_explicit_nodes(self, tmp_path):
        output = tmp_path / "nested" / "graph.json"
        ret = generate_graph.main([
            "--nodes", "4", "--complexity", "0", "--output", str(output), "-q",
        ])

        assert ret == 0
        assert json.loads(output.read_text()) == [
            {"group": "nodes", "data": {"id": str(i)}} for i in range(4)
        ]

    def test_with_metadata(self, tmp_path):
        output = tmp_path / "graph.json"
        ret = generate_graph.main([
            "--nodes", "8", "--complexity", "1", "--seed", "3",
            "--with-metadata", "--output", str(output),
        ])

        assert ret == 0
        data = json.loads(output.read_text())
        assert data["metadata"]["seed"] == 3
        assert data["metadata"]["node_count"] == 8

    def test_config_file(self, tmp_path):
        config = tmp_path / "graph.yaml"
        config.write_text("graph:\n  nodes: 6\n  complexity: 1\n  seed: 2\n")
        output = tmp_path / "graph.json"

        ret = generate_graph.main(["--config", str(config), "--output", str(output)])

        assert ret == 0
        elements = json.loads(output.read_text())
        assert sum(1 for e in elements if e["group"] == "nodes") == 6

    def test_seed_from_env(self, tmp_path, monkeypatch):
        monkeypatch.setenv("GRAPH_ELEMENTS_SEED", "11")
        first = tmp_path / "a.json"
        second = tmp_path / "b.json"
        generate_graph.main(["--scale", "small", "--output", str(first), "-q"])
        generate_graph.main(["--scale", "small", "--seed", "11", "--output", str(second), "-q"])

        assert first.read_text() == second.read_text()

    def test_invalid_nodes_returns_error(self, tmp_path, capsys):
        ret = generate_graph.main(["--nodes", "-3", "--output", str(tmp_path / "g.json")])

        assert ret == 1
        assert "Error generating graph" in capsys.readouterr().err

    def test_missing_config_returns_error(self, tmp_path):
        ret = generate_graph.main([
            "--config", str(tmp_path / "missing.yaml"), "--output", str(tmp_path / "g.json"),
        ])
        assert ret == 1

    def test_seed_overrides_config_file(self, tmp_path):
        config = tmp_path / "graph.yaml"
        config.write_text("graph:\n  nodes: 6\n  complexity: 1\n  seed: 42\n")
        output = tmp_path / "graph.json"

        ret = generate_graph.main([
            "--config", str(config), "--seed", "7", "--with-metadata", "--output", str(output),
        ])

        assert ret == 0
        assert json.loads(output.read_text())["metadata"]["seed"] == 7

    def test_config_file_seed_kept_without_override(self, tmp_path):
        config = tmp_path / "graph.yaml"
        config.write_text("graph:\n  nodes: 6\n  seed: 5\n")
        output = tmp_path / "graph.json"

        generate_graph.main(["--config", str(config), "--with-metadata", "--output", str(output)])

        assert json.loads(output.read_text())["metadata"]["seed"] == 5

    def test_complexity_requires_nodes(self, tmp_path):
        with pytest.raises(SystemExit) as exc:
            generate_graph.main([
                "--scale", "tiny", "--complexity", "3", "--output", str(tmp_path / "g.json"),
            ])
        assert exc.value.code == 2

    def test_nodes_default_complexity(self, tmp_path):
        output = tmp_path / "graph.json"
        generate_graph.main([
            "--nodes", "5", "--seed", "1", "--with-metadata", "--output", str(output), "-q",
        ])
        assert json.loads(output.read_text())["metadata"]["complexity"] == 1

    def test_output_defaults_to_settings_dir(self, tmp_path, monkeypatch):
        monkeypatch.setenv("GRAPH_ELEMENTS_OUTPUT_DIR", str(tmp_path / "out"))

        ret = generate_graph.main(["--nodes", "3", "--complexity", "0", "-q"])

        assert ret == 0
        output = tmp_path / "out" / "graph.json"
        assert json.loads(output.read_text()) == [
            {"group": "nodes", "data": {"id": str(i)}} for i in range(3)
        ]
