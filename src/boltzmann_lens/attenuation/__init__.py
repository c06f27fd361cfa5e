"""Attenuation: reweighting node complexity with the project graph."""

from .loader import (
    NEUTRAL_WEIGHT,
    Active,
    Attenuation,
    Disabled,
    get_weight,
    load_attenuation,
    project_graph_path,
)
from .models import WeightedEdge, WeightedGraph, WeightedGraphNode

__all__ = [
    "Attenuation",
    "Active",
    "Disabled",
    "NEUTRAL_WEIGHT",
    "get_weight",
    "load_attenuation",
    "project_graph_path",
    "WeightedEdge",
    "WeightedGraph",
    "WeightedGraphNode",
]
