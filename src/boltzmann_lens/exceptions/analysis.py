"""Analysis-file exceptions raised by the reader adapters."""

from pathlib import Path

from .base import BoltzmannLensError


class AnalysisError(BoltzmannLensError):
    """Base class for analysis-related errors."""
    pass


class AnalysisFileError(AnalysisError):
    """Raised when an analyser output file cannot be read or decoded."""

    def __init__(self, filepath: Path, reason: str):
        super().__init__(
            f"Cannot read analysis file: {filepath}",
            details={"filepath": str(filepath), "reason": reason},
        )
        self.filepath = filepath
        self.reason = reason
