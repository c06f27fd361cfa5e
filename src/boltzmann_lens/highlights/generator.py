"""Highlight generation: attenuate, filter, normalize, color.

Pipeline for one file:

    attenuated = complexity × weight(parent, node)
    drop attenuated < min_complexity_per_loc
    normalized = (attenuated - min) / (max - min)     min/max over nonzero nodes
    drop normalized == 0, NaN, ±inf, or below complexity_threshold
    color   = (255·n, 255·(1-n), 0, 255·alpha)

Degenerate ranges (every node zero, or a single distinct nonzero value) make
the division produce NaN or infinities. Those are filtered out explicitly
rather than special-cased, so such files simply yield fewer highlights.
"""

from __future__ import annotations

import math
from typing import Optional

import numpy as np

from ..analysis.models import Analysis
from ..attenuation import Attenuation, Disabled, get_weight
from ..config import HighlightConfig
from ..logging_config import get_logger
from .color import Color
from .models import Highlight, HighlightCandidate
from .resolver import resolve

logger = get_logger(__name__)


def format_hover_text(attenuated_complexity: float) -> str:
    return f"Complexity: {attenuated_complexity:.2f}"


def generate_candidates(
    analysis: Optional[Analysis],
    attenuation: Optional[Attenuation] = None,
    config: Optional[HighlightConfig] = None,
) -> list[HighlightCandidate]:
    """Score every node and return the ones worth highlighting.

    Args:
        analysis: Parsed complexity tree for one file (None is treated as empty)
        attenuation: Loaded attenuation; defaults to ``Disabled()``
        config: Highlight options; defaults to ``HighlightConfig()``

    Returns:
        Unordered, possibly overlapping candidates with normalized
        complexity in (0, 1].
    """
    if analysis is None or not analysis.nodes:
        return []
    if attenuation is None:
        attenuation = Disabled()
    if config is None:
        config = HighlightConfig()

    logger.info(
        "Using complexity threshold: %s, highlight alpha: %s, min complexity per LOC: %s",
        config.complexity_threshold,
        config.highlight_alpha,
        config.min_complexity_per_loc,
    )

    nodes = analysis.nodes
    complexity = np.array([node.complexity for node in nodes], dtype=float)
    weights = np.array(
        [get_weight(attenuation, node.parent_name, node.name) for node in nodes], dtype=float
    )
    attenuated = complexity * weights

    kept = attenuated >= config.min_complexity_per_loc
    logger.info("Nodes after absolute complexity filter: %d/%d", int(kept.sum()), len(nodes))

    min_complexity, max_complexity = _complexity_range(attenuated[kept])

    with np.errstate(divide="ignore", invalid="ignore"):
        normalized = (attenuated - min_complexity) / (max_complexity - min_complexity)
        kept &= np.isfinite(normalized)
        kept &= normalized != 0
        kept &= normalized >= config.complexity_threshold

    candidates = []
    for index in np.flatnonzero(kept):
        node = nodes[index]
        value = float(normalized[index])
        node_complexity = float(attenuated[index])
        candidates.append(
            HighlightCandidate(
                span=node.span,
                attenuated_complexity=node_complexity,
                normalized_complexity=value,
                color=Color.for_complexity(value, config.highlight_alpha),
                hover_text=format_hover_text(node_complexity),
                name=node.name,
            )
        )

    logger.debug("Generated %d highlight candidates from %d nodes", len(candidates), len(nodes))
    return candidates


def generate(
    analysis: Optional[Analysis],
    attenuation: Optional[Attenuation] = None,
    config: Optional[HighlightConfig] = None,
) -> list[Highlight]:
    """Candidates for ``analysis`` reduced to a non-overlapping set."""
    return resolve(generate_candidates(analysis, attenuation, config))


def _complexity_range(values: np.ndarray) -> tuple[float, float]:
    """(min, max) over the nonzero values.

    With no nonzero value the sentinels (inf, 0) make every normalization
    NaN, so nothing survives.
    """
    nonzero = values[values != 0]
    if nonzero.size == 0:
        return math.inf, 0.0
    return float(nonzero.min()), max(0.0, float(nonzero.max()))
