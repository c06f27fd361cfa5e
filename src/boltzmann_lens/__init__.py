"""
Boltzmann Lens - complexity highlights for source files

Turns the per-node complexity tree produced by the Boltzmann analyser into a
small, non-overlapping set of ranked highlight regions, optionally reweighted
by a project-wide weighted graph (attenuation).
"""

__version__ = "0.1.0"

from .analysis import Analysis, AnalysisNode, Span, load_analysis, parse_analysis
from .attenuation import Active, Attenuation, Disabled, WeightedGraph, get_weight, load_attenuation
from .config import HighlightConfig, load_config
from .highlights import Color, Highlight, HighlightCandidate, generate, generate_candidates, resolve
from .session import HighlightSession

__all__ = [
    "generate",  # Main entry point: analysis -> resolved highlights
    "generate_candidates",
    "resolve",
    "Analysis",
    "AnalysisNode",
    "Span",
    "parse_analysis",
    "load_analysis",
    "Attenuation",
    "Active",
    "Disabled",
    "WeightedGraph",
    "get_weight",
    "load_attenuation",
    "HighlightConfig",
    "load_config",
    "Color",
    "Highlight",
    "HighlightCandidate",
    "HighlightSession",
]
