"""Highlight records produced by the generator and the overlap resolver."""

from dataclasses import dataclass

from ..analysis.models import Span
from .color import Color


@dataclass(frozen=True)
class Highlight:
    """A region to draw: where, in what color, and what to show on hover."""

    span: Span
    hover_text: str
    color: Color


@dataclass(frozen=True)
class HighlightCandidate:
    """A prospective highlight, before overlap resolution.

    ``normalized_complexity`` is in (0, 1] and only ranks candidates against
    each other; it is dropped by ``to_highlight``.
    """

    span: Span
    attenuated_complexity: float
    normalized_complexity: float
    color: Color
    hover_text: str
    name: str = "unknown"

    def to_highlight(self) -> Highlight:
        return Highlight(span=self.span, hover_text=self.hover_text, color=self.color)
