"""Shared test fixtures for Boltzmann Lens."""

import json

import pytest

from boltzmann_lens.analysis.models import Analysis, AnalysisNode, Span
from boltzmann_lens.attenuation import Active, WeightedEdge, WeightedGraph, WeightedGraphNode


def _line_span(line: int, length: int = 10) -> Span:
    """Single-line span starting at column 0."""
    return Span(line, 0, line, length)


def _make_analysis(*nodes: AnalysisNode) -> Analysis:
    total = round(nodes[0].complexity, 2) if nodes else 0.0
    return Analysis(nodes=tuple(nodes), total_complexity=total)


def _disjoint_analysis(complexities, parent_name=None) -> Analysis:
    """One node per line, so no two spans overlap."""
    return _make_analysis(
        *[
            AnalysisNode(complexity=c, span=_line_span(i * 2), name=f"node_{i}", parent_name=parent_name)
            for i, c in enumerate(complexities)
        ]
    )


def _make_graph(edges) -> WeightedGraph:
    """Graph from ``{(parent, child): self_information}``."""
    nodes: dict = {}
    for (parent, child), weight in edges.items():
        nodes.setdefault(parent, {})[child] = WeightedEdge(name=child, count=1, self_information=weight)
    return WeightedGraph(nodes={p: WeightedGraphNode(edges=e) for p, e in nodes.items()})


@pytest.fixture
def line_span():
    return _line_span


@pytest.fixture
def make_analysis():
    return _make_analysis


@pytest.fixture
def disjoint_analysis():
    return _disjoint_analysis


@pytest.fixture
def make_graph():
    return _make_graph


@pytest.fixture
def empty_analysis():
    """Analysis with no nodes."""
    return Analysis()


@pytest.fixture
def foo_bar_attenuation():
    """Attenuation where ``bar`` under ``foo`` is weighted 0.1."""
    return Active(_make_graph({("foo", "bar"): 0.1}))


@pytest.fixture
def raw_analysis():
    """Decoded analyser output: root, a function, an empty span, a nested call."""
    return {
        "tree": {
            "nodes": [
                {
                    "complexity": 42.3456,
                    "local_complexity": 1.5,
                    "name": "source_file",
                    "syntax_span": {"start_row": 0, "start_column": 0, "end_row": 20, "end_column": 0},
                },
                {
                    "complexity": 30.0,
                    "local_complexity": 12.0,
                    "name": "function_item",
                    "syntax_span": {"start_row": 2, "start_column": 0, "end_row": 10, "end_column": 1},
                    "parent": {"index": 0},
                },
                {
                    "complexity": 0.0,
                    "local_complexity": 0.0,
                    "name": "empty",
                    "syntax_span": {"start_row": 4, "start_column": 2, "end_row": 4, "end_column": 2},
                    "parent": {"index": 1},
                },
                {
                    "complexity": 8.0,
                    "local_complexity": 8.0,
                    "syntax_span": {"start_row": 5, "start_column": 4, "end_row": 5, "end_column": 30},
                    "parent": {"index": 1},
                },
            ]
        }
    }


@pytest.fixture
def project_dir(tmp_path):
    """Project folder with a .boltzmann/project.blta weighted graph."""
    storage = tmp_path / ".boltzmann"
    storage.mkdir()
    project = {
        "weighted_graph": {
            "nodes": {
                "function_item": {
                    "edges": {
                        "call_expression": {"name": "call_expression", "count": 40, "self_information": 0.25},
                        "if_expression": {"name": "if_expression", "count": 3, "self_information": 2.0},
                    }
                },
                "source_file": {"edges": {}},
            }
        }
    }
    (storage / "project.blta").write_text(json.dumps(project))
    return tmp_path
