"""Greedy overlap resolution for highlight candidates.

Candidates are visited from most to least complex and kept when they do not
overlap anything already kept. This is not a maximum-weight selection (that
would be weighted interval scheduling); the greedy order is what decides which
regions are shown, including the stable tie order for equal complexities.
"""

from __future__ import annotations

from collections.abc import Iterable

from ..analysis.models import Span
from ..logging_config import get_logger
from .models import Highlight, HighlightCandidate

logger = get_logger(__name__)


def ranges_overlap(a: Span, b: Span) -> bool:
    """True unless one range ends strictly before the other starts.

    Touching endpoints count as overlapping.
    """
    return not (a.end < b.start or b.end < a.start)


def resolve(candidates: Iterable[HighlightCandidate]) -> list[Highlight]:
    """Select a non-overlapping subset, favouring higher normalized complexity.

    O(n²) in the number of candidates, which is bounded by the syntax nodes
    of a single file.
    """
    # sorted() is stable, equal complexities keep their input order
    ordered = sorted(candidates, key=lambda c: c.normalized_complexity, reverse=True)

    kept: list[HighlightCandidate] = []
    for candidate in ordered:
        if any(ranges_overlap(candidate.span, other.span) for other in kept):
            continue
        kept.append(candidate)

    logger.debug("Kept %d of %d candidates after overlap resolution", len(kept), len(ordered))
    return [candidate.to_highlight() for candidate in kept]
