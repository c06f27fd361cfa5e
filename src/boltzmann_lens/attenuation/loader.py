"""Fail-soft loading of the project attenuation graph.

Attenuation is strictly optional. Loading produces an immutable result,
``Disabled(reason)`` or ``Active(graph)``, and every lookup on either one
returns a usable weight, so highlight generation never has to care whether
attenuation is on.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from ..analysis.parser import ANALYSIS_SUFFIX, BOLTZMANN_STORAGE_DIR
from ..logging_config import get_logger
from .models import WeightedGraph

logger = get_logger(__name__)

PROJECT_ANALYSIS_NAME = f"project{ANALYSIS_SUFFIX}"
NEUTRAL_WEIGHT = 1.0


@dataclass(frozen=True)
class Disabled:
    """Attenuation is off; every weight is neutral."""

    reason: str = "disabled"

    @property
    def enabled(self) -> bool:
        return False

    def weight(self, parent_name: Optional[str], child_name: str) -> float:
        return NEUTRAL_WEIGHT


@dataclass(frozen=True)
class Active:
    """Attenuation backed by a loaded project graph."""

    graph: WeightedGraph

    @property
    def enabled(self) -> bool:
        return True

    def weight(self, parent_name: Optional[str], child_name: str) -> float:
        """Self-information of the parent -> child edge, or 1.0 if unknown."""
        if parent_name is None:
            return NEUTRAL_WEIGHT
        try:
            edge = self.graph.edge(parent_name, child_name)
        except (AttributeError, KeyError, TypeError) as e:
            logger.debug("Error attenuating %s: %s", child_name, e)
            return NEUTRAL_WEIGHT
        if edge is None:
            return NEUTRAL_WEIGHT
        return edge.self_information


Attenuation = Union[Disabled, Active]


def get_weight(attenuation: Attenuation, parent_name: Optional[str], child_name: str) -> float:
    """Attenuation weight for ``child_name`` appearing under ``parent_name``."""
    return attenuation.weight(parent_name, child_name)


def project_graph_path(project_folder: Union[str, Path]) -> Path:
    return Path(project_folder) / BOLTZMANN_STORAGE_DIR / PROJECT_ANALYSIS_NAME


def load_attenuation(project_folder: Union[str, Path, None], enabled: bool = True) -> Attenuation:
    """Load the project's weighted graph for attenuation.

    Reads ``<project_folder>/.boltzmann/project.blta`` and takes its
    ``weighted_graph`` entry. Never raises: a disabled setting, a missing
    project analysis or a malformed file all yield ``Disabled``.

    Args:
        project_folder: Project root; None disables attenuation
        enabled: The ``attenuation`` configuration setting

    Returns:
        ``Active(graph)`` on success, otherwise ``Disabled(reason)``
    """
    if not enabled:
        logger.debug("Attenuation disabled")
        return Disabled("disabled by configuration")
    if project_folder is None:
        logger.debug("Attenuation disabled: no project folder")
        return Disabled("no project folder")

    path = project_graph_path(project_folder)
    try:
        with open(path, encoding="utf-8") as f:
            project_data = json.load(f)
    except FileNotFoundError:
        logger.info("Project analysis not found. Run project analysis to enable attenuation.")
        return Disabled("project analysis not found")
    except (OSError, ValueError, RecursionError) as e:
        logger.warning("Error loading project analysis for attenuation: %s", e)
        return Disabled(f"unreadable project analysis: {e}")

    if not isinstance(project_data, dict) or not project_data.get("weighted_graph"):
        logger.info("Project analysis has no weighted graph. Run project analysis to enable attenuation.")
        return Disabled("no weighted graph in project analysis")

    try:
        graph = WeightedGraph.from_dict(project_data["weighted_graph"])
    except ValueError as e:
        logger.warning("Error loading project analysis for attenuation: %s", e)
        return Disabled(f"malformed weighted graph: {e}")

    logger.info("Attenuation enabled (%d nodes, %d edges)", len(graph.nodes), graph.edge_count)
    return Active(graph)
