"""Exception hierarchy for Boltzmann Lens."""

from .analysis import AnalysisError, AnalysisFileError
from .base import BoltzmannLensError
from .config import ConfigurationError, InvalidConfigError

__all__ = [
    "BoltzmannLensError",
    "AnalysisError",
    "AnalysisFileError",
    "ConfigurationError",
    "InvalidConfigError",
]
