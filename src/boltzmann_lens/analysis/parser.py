"""Reader for Boltzmann analyser output (``*.blta`` JSON).

The analyser writes one file per source file under ``<project>/.boltzmann/``::

    {"tree": {"nodes": [
        {"complexity": 42.0, "local_complexity": 3.5, "name": "function_item",
         "syntax_span": {"start_row": 0, "start_column": 0,
                         "end_row": 12, "end_column": 1},
         "parent": {"index": 0}},
        ...
    ]}}

Parsing is lenient: a missing tree yields an empty ``Analysis`` and unusable
nodes are skipped, so highlight generation never sees malformed input.
"""

from __future__ import annotations

import json
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any, Optional, Union

from ..exceptions import AnalysisFileError
from ..logging_config import get_logger
from .models import Analysis, AnalysisNode, Span

logger = get_logger(__name__)

BOLTZMANN_STORAGE_DIR = ".boltzmann"
ANALYSIS_SUFFIX = ".blta"
UNKNOWN_NODE_NAME = "unknown"

_SPAN_KEYS = ("start_row", "start_column", "end_row", "end_column")


def parse_analysis(data: Any) -> Analysis:
    """Build an ``Analysis`` from decoded analyser JSON.

    Args:
        data: The decoded JSON document (normally a dict with a ``tree`` key)

    Returns:
        Analysis with nodes in traversal order. Nodes with an empty span are
        excluded; ``total_complexity`` is the first node's complexity rounded
        to two decimals, or 0 for an empty tree.
    """
    raw_nodes = _raw_nodes(data)
    if not raw_nodes:
        return Analysis()

    total_complexity = 0.0
    root = raw_nodes[0]
    if isinstance(root, Mapping) and _is_number(root.get("complexity")):
        total_complexity = round(float(root["complexity"]), 2)

    nodes: list[AnalysisNode] = []
    for position, raw in enumerate(raw_nodes):
        if not isinstance(raw, Mapping):
            logger.debug("Skipping node %d: not an object", position)
            continue

        span = _parse_span(raw.get("syntax_span"))
        if span is None:
            logger.debug("Skipping node %d: missing or invalid syntax_span", position)
            continue
        if span.is_empty:
            continue

        complexity = raw.get("local_complexity")
        if not _is_number(complexity):
            logger.debug("Skipping node %d: missing local_complexity", position)
            continue

        name = raw.get("name")
        nodes.append(
            AnalysisNode(
                complexity=float(complexity),
                span=span,
                name=name if isinstance(name, str) and name else UNKNOWN_NODE_NAME,
                parent_name=_resolve_parent_name(raw.get("parent"), raw_nodes),
            )
        )

    return Analysis(nodes=tuple(nodes), total_complexity=total_complexity)


def load_analysis(path: Union[str, Path]) -> Analysis:
    """Read and parse an analyser output file.

    Raises:
        AnalysisFileError: If the file is missing, unreadable or not JSON
    """
    path = Path(path)
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError:
        raise AnalysisFileError(path, "file not found")
    except json.JSONDecodeError as e:
        raise AnalysisFileError(path, f"invalid JSON: {e.msg} at line {e.lineno}")
    except RecursionError:
        raise AnalysisFileError(path, "invalid JSON: nesting too deep")
    except (OSError, ValueError) as e:
        raise AnalysisFileError(path, str(e))

    analysis = parse_analysis(data)
    logger.debug("Parsed %d nodes from %s", len(analysis), path)
    return analysis


def analysis_path_for(project: Union[str, Path], source_file: Union[str, Path]) -> Path:
    """Location of the analyser output for ``source_file`` inside ``project``.

    ``src/app.py`` maps to ``<project>/.boltzmann/src/app.py.blta``. Absolute
    source paths are made relative to the project first.

    Raises:
        AnalysisFileError: If an absolute ``source_file`` lies outside ``project``
    """
    project = Path(project)
    source = Path(source_file)
    if source.is_absolute():
        try:
            source = source.relative_to(project)
        except ValueError:
            raise AnalysisFileError(source, "source file is outside the project")
    return project / BOLTZMANN_STORAGE_DIR / f"{source.as_posix()}{ANALYSIS_SUFFIX}"


def _raw_nodes(data: Any) -> Sequence[Any]:
    if not isinstance(data, Mapping):
        return ()
    tree = data.get("tree")
    if not isinstance(tree, Mapping):
        return ()
    nodes = tree.get("nodes")
    if not isinstance(nodes, list):
        return ()
    return nodes


def _parse_span(raw: Any) -> Optional[Span]:
    if not isinstance(raw, Mapping):
        return None
    values = [raw.get(key) for key in _SPAN_KEYS]
    if not all(isinstance(v, int) and not isinstance(v, bool) for v in values):
        return None
    return Span(*values)


def _resolve_parent_name(parent: Any, raw_nodes: Sequence[Any]) -> Optional[str]:
    """Follow a ``{"index": n}`` parent reference into the same node list."""
    if not isinstance(parent, Mapping):
        return None
    index = parent.get("index")
    if not isinstance(index, int) or isinstance(index, bool):
        return None
    if not 0 <= index < len(raw_nodes):
        return None
    parent_node = raw_nodes[index]
    if not isinstance(parent_node, Mapping):
        return None
    name = parent_node.get("name")
    return name if isinstance(name, str) and name else None


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)
