"""Project-wide weighted graph used to attenuate node complexity.

Edges are directed from a syntactic parent to a named child:
``nodes[parent].edges[child].self_information`` is the multiplicative weight
applied to ``child`` whenever it appears under ``parent``.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from ..logging_config import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class WeightedEdge:
    """Parent -> child occurrence statistics."""

    name: str
    count: int
    self_information: float


@dataclass(frozen=True)
class WeightedGraphNode:
    edges: Mapping[str, WeightedEdge] = field(default_factory=lambda: MappingProxyType({}))


@dataclass(frozen=True)
class WeightedGraph:
    """Read-only weighted graph keyed by node name."""

    nodes: Mapping[str, WeightedGraphNode] = field(default_factory=lambda: MappingProxyType({}))

    def edge(self, parent_name: str, child_name: str) -> WeightedEdge | None:
        """Edge from ``parent_name`` to ``child_name``, or None if unknown."""
        parent = self.nodes.get(parent_name)
        if parent is None:
            return None
        return parent.edges.get(child_name)

    @property
    def edge_count(self) -> int:
        return sum(len(node.edges) for node in self.nodes.values())

    @classmethod
    def from_dict(cls, data: Any) -> WeightedGraph:
        """Build a graph from the analyser's ``weighted_graph`` JSON object.

        Edges without a numeric ``self_information`` are dropped.

        Raises:
            ValueError: If the top-level structure is not a graph
        """
        if not isinstance(data, Mapping):
            raise ValueError("weighted_graph must be an object")
        raw_nodes = data.get("nodes")
        if not isinstance(raw_nodes, Mapping):
            raise ValueError("weighted_graph.nodes must be an object")

        nodes: dict[str, WeightedGraphNode] = {}
        for node_name, raw_node in raw_nodes.items():
            raw_edges = raw_node.get("edges") if isinstance(raw_node, Mapping) else None
            if not isinstance(raw_edges, Mapping):
                raw_edges = {}

            edges: dict[str, WeightedEdge] = {}
            for child_name, raw_edge in raw_edges.items():
                edge = _parse_edge(child_name, raw_edge)
                if edge is None:
                    logger.debug("Dropping edge %s -> %s: no self_information", node_name, child_name)
                    continue
                edges[child_name] = edge

            nodes[node_name] = WeightedGraphNode(edges=MappingProxyType(edges))

        return cls(nodes=MappingProxyType(nodes))


def _parse_edge(child_name: str, raw: Any) -> WeightedEdge | None:
    if not isinstance(raw, Mapping):
        return None
    weight = raw.get("self_information")
    if not isinstance(weight, (int, float)) or isinstance(weight, bool):
        return None
    count = raw.get("count", 0)
    name = raw.get("name", child_name)
    return WeightedEdge(
        name=name if isinstance(name, str) else child_name,
        count=count if isinstance(count, int) and not isinstance(count, bool) else 0,
        self_information=float(weight),
    )
