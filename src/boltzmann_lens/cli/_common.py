"""Shared CLI helpers."""

from typing import Any

from rich.console import Console

from ..highlights.models import Highlight

console = Console()
err_console = Console(stderr=True)


def highlight_to_dict(highlight: Highlight) -> dict[str, Any]:
    """JSON-ready form of a resolved highlight."""
    return {
        "range": list(highlight.span.as_tuple()),
        "hover": highlight.hover_text,
        "color": highlight.color.hex,
    }


def format_range(highlight: Highlight) -> str:
    """1-based ``line:col-line:col`` for display."""
    span = highlight.span
    return f"{span.start_line + 1}:{span.start_col + 1}-{span.end_line + 1}:{span.end_col + 1}"
