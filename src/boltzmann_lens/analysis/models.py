"""Data models for one file's complexity measurements.

A parsed analyser run is a flat, ordered list of nodes. The first node is
conventionally the whole-file root and carries the file's total complexity.
"""

from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True, order=True)
class Span:
    """Half-open source range, zero-based lines and columns."""

    start_line: int
    start_col: int
    end_line: int
    end_col: int

    @property
    def start(self) -> tuple[int, int]:
        return (self.start_line, self.start_col)

    @property
    def end(self) -> tuple[int, int]:
        return (self.end_line, self.end_col)

    @property
    def is_empty(self) -> bool:
        return self.start == self.end

    def as_tuple(self) -> tuple[int, int, int, int]:
        return (self.start_line, self.start_col, self.end_line, self.end_col)


@dataclass(frozen=True)
class AnalysisNode:
    """A syntax node with its local (per-node) complexity score."""

    complexity: float
    span: Span
    name: str = "unknown"
    parent_name: Optional[str] = None  # None at the root or when unresolvable


@dataclass(frozen=True)
class Analysis:
    """Complexity measurements for a single source file."""

    nodes: tuple[AnalysisNode, ...] = field(default_factory=tuple)
    total_complexity: float = 0.0

    def __len__(self) -> int:
        return len(self.nodes)

    @property
    def is_empty(self) -> bool:
        return not self.nodes
