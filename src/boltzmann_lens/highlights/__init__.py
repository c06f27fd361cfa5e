"""Highlight generation and overlap resolution."""

from .color import Color
from .generator import format_hover_text, generate, generate_candidates
from .models import Highlight, HighlightCandidate
from .resolver import ranges_overlap, resolve

__all__ = [
    "Color",
    "Highlight",
    "HighlightCandidate",
    "generate",
    "generate_candidates",
    "format_hover_text",
    "ranges_overlap",
    "resolve",
]
