"""Caller-owned display state for a host integration.

``HighlightSession`` holds what is currently shown for the active document:
the resolved highlights, the file's total complexity and whether highlighting
is switched on. Hosts create one per editor window and pass it to their
renderer; nothing here is global.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Optional

from .highlights.models import Highlight
from .logging_config import get_logger

logger = get_logger(__name__)

COMPLEXITY_UNIT = "Ω"


def format_complexity(value: float) -> str:
    return f"{value:.2f}{COMPLEXITY_UNIT}"


def complexity_badge(value: float) -> str:
    """Short badge for a file's total complexity (``12``, ``340``, ``5k``, ``2m``)."""
    if value >= 1_000_000:
        return f"{_round_half_up(value / 1_000_000)}m"
    if value >= 1000:
        return f"{_round_half_up(value / 1000)}k"
    return str(_round_half_up(value))


def inset_title(total_complexity: float) -> Optional[str]:
    """Title for the inset shown at the top of a file, or None when empty."""
    if total_complexity == 0:
        return None
    return f"File Complexity: {format_complexity(total_complexity)}"


def _round_half_up(value: float) -> int:
    return int(value + 0.5) if value >= 0 else -int(-value + 0.5)


class HighlightSession:
    """Highlights and total complexity currently displayed for one document."""

    def __init__(self, enabled: bool = False) -> None:
        self._enabled = enabled
        self._highlights: tuple[Highlight, ...] = ()
        self._total_complexity = 0.0
        self._filename: Optional[str] = None

    @property
    def enabled(self) -> bool:
        return self._enabled

    @property
    def highlights(self) -> tuple[Highlight, ...]:
        return self._highlights

    @property
    def total_complexity(self) -> float:
        return self._total_complexity

    @property
    def filename(self) -> Optional[str]:
        return self._filename

    def enable(self) -> None:
        self._enabled = True

    def disable(self) -> None:
        self._enabled = False
        self.clear()

    def toggle(self) -> bool:
        """Flip highlighting on or off and return the new state."""
        if self._enabled:
            self.disable()
        else:
            self.enable()
        logger.info("Highlighting %s", "enabled" if self._enabled else "disabled")
        return self._enabled

    def register(
        self,
        highlights: Sequence[Highlight],
        total_complexity: float = 0.0,
        filename: Optional[str] = None,
    ) -> bool:
        """Replace the displayed highlights. Ignored while disabled.

        Returns:
            True if the highlights were stored.
        """
        if not self._enabled:
            return False
        self._highlights = tuple(highlights)
        self._total_complexity = total_complexity
        self._filename = filename
        logger.debug("Registered %d highlights for %s", len(self._highlights), filename)
        return True

    def clear(self) -> None:
        logger.debug("Clearing %d highlights", len(self._highlights))
        self._highlights = ()
        self._total_complexity = 0.0
        self._filename = None

    def status_text(self) -> Optional[str]:
        """Status bar text, or None when there is nothing to show."""
        if not self._enabled or self._filename is None:
            return None
        return format_complexity(self._total_complexity)

    def status_tooltip(self) -> Optional[str]:
        if self.status_text() is None:
            return None
        return f"Total file complexity: {format_complexity(self._total_complexity)} ({self._filename})"
