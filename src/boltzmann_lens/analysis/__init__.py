"""Analysis tree model and the analyser output reader."""

from .models import Analysis, AnalysisNode, Span
from .parser import (
    ANALYSIS_SUFFIX,
    BOLTZMANN_STORAGE_DIR,
    analysis_path_for,
    load_analysis,
    parse_analysis,
)

__all__ = [
    "Analysis",
    "AnalysisNode",
    "Span",
    "parse_analysis",
    "load_analysis",
    "analysis_path_for",
    "BOLTZMANN_STORAGE_DIR",
    "ANALYSIS_SUFFIX",
]
