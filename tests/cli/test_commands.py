"""Tests for the boltzmann-lens command line interface."""

import json

import pytest
from typer.testing import CliRunner

from boltzmann_lens import __version__
from boltzmann_lens.cli import app

runner = CliRunner()


def _node(name, local, span, parent=None):
    node = {
        "name": name,
        "local_complexity": local,
        "syntax_span": dict(zip(("start_row", "start_column", "end_row", "end_column"), span)),
    }
    if parent is not None:
        node["parent"] = {"index": parent}
    return node


@pytest.fixture
def workspace(project_dir, monkeypatch):
    """Project with a weighted graph and one analysed source file."""
    monkeypatch.setenv("HOME", str(project_dir))
    monkeypatch.chdir(project_dir)
    monkeypatch.delenv("BOLTZMANN_ATTENUATION", raising=False)
    monkeypatch.delenv("BOLTZMANN_COMPLEXITY_THRESHOLD", raising=False)

    analysis = {
        "tree": {
            "nodes": [
                dict(_node("source_file", 0.0, (0, 0, 40, 0)), complexity=1234.5678),
                _node("function_item", 2.0, (1, 0, 20, 1), parent=0),
                _node("call_expression", 16.0, (3, 4, 3, 30), parent=1),
                _node("if_expression", 6.0, (22, 0, 30, 1), parent=0),
                _node("if_expression", 4.0, (5, 0, 9, 1), parent=1),
            ]
        }
    }
    path = project_dir / ".boltzmann" / "app.py.blta"
    path.write_text(json.dumps(analysis))
    return path


class TestHighlightCommand:
    """boltzmann-lens highlight"""

    def test_json_output(self, workspace):
        result = runner.invoke(app, ["--quiet", "highlight", str(workspace), "--threshold", "0", "--json"])
        assert result.exit_code == 0, result.output
        output = json.loads(result.stdout)
        assert output["total_complexity"] == 1234.57
        assert output["attenuation"] is False
        # function_item is the range minimum and normalizes to 0
        assert [h["hover"] for h in output["highlights"]] == [
            "Complexity: 16.00",
            "Complexity: 6.00",
            "Complexity: 4.00",
        ]
        assert output["highlights"][0]["range"] == [3, 4, 3, 30]
        assert output["highlights"][0]["color"] == "#ff00004d"

    def test_attenuation_reweights(self, workspace):
        result = runner.invoke(
            app,
            ["--quiet", "highlight", str(workspace), "-p", str(workspace.parent.parent), "--attenuation",
             "--threshold", "0", "--json"],
        )
        assert result.exit_code == 0, result.output
        output = json.loads(result.stdout)
        assert output["attenuation"] is True
        hovers = [h["hover"] for h in output["highlights"]]
        # call 16 × 0.25 = 4, nested if 4 × 2.0 = 8
        assert hovers[0] == "Complexity: 8.00"
        assert "Complexity: 16.00" not in hovers

    def test_default_threshold(self, workspace):
        result = runner.invoke(app, ["--quiet", "highlight", str(workspace), "--json"])
        assert result.exit_code == 0, result.output
        hovers = [h["hover"] for h in json.loads(result.stdout)["highlights"]]
        assert hovers == ["Complexity: 16.00"]

    def test_table_output(self, workspace):
        result = runner.invoke(app, ["--quiet", "highlight", str(workspace), "--threshold", "0"])
        assert result.exit_code == 0, result.output
        assert "3 highlight(s)" in result.stdout
        assert "16.00" in result.stdout

    def test_invalid_analysis_file(self, tmp_path):
        path = tmp_path / "broken.blta"
        path.write_text("{")
        result = runner.invoke(app, ["--quiet", "highlight", str(path)])
        assert result.exit_code == 1
        assert "Error" in result.output

    def test_unreadable_project_graph_does_not_block(self, workspace):
        (workspace.parent / "project.blta").write_text("[" * 200000 + "]" * 200000)
        result = runner.invoke(app, ["--quiet", "highlight", str(workspace), "-p", ".", "--attenuation", "--json"])
        assert result.exit_code == 0, result.output
        assert json.loads(result.stdout)["attenuation"] is False

    def test_missing_analysis_file(self, tmp_path):
        result = runner.invoke(app, ["highlight", str(tmp_path / "nope.blta")])
        assert result.exit_code != 0


class TestComplexityCommand:
    """boltzmann-lens complexity"""

    def test_json_output(self, workspace):
        result = runner.invoke(app, ["--quiet", "complexity", str(workspace), "--json"])
        assert result.exit_code == 0, result.output
        output = json.loads(result.stdout)
        assert output == {
            "file": str(workspace.resolve()),
            "total_complexity": 1234.57,
            "badge": "1k",
            "inset": "File Complexity: 1234.57Ω",
            "nodes": 5,
        }

    def test_badge_hidden_by_config(self, workspace):
        (workspace.parent.parent / "boltzmann-lens.toml").write_text("show_file_complexity = false\n")
        result = runner.invoke(app, ["--quiet", "complexity", str(workspace), "--json"])
        assert result.exit_code == 0, result.output
        assert json.loads(result.stdout)["badge"] is None


def test_version():
    result = runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.stdout
