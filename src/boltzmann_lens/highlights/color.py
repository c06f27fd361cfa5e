"""Complexity heat colors: green for low, red for high."""

from __future__ import annotations

import math
from dataclasses import dataclass

CHANNEL_MAX = 255


def to_channel(fraction: float) -> int:
    """Scale a 0-1 fraction to a 0-255 channel, rounding halves up."""
    return int(math.floor(CHANNEL_MAX * fraction + 0.5))


@dataclass(frozen=True)
class Color:
    """RGBA color with 0-255 channels."""

    red: int
    green: int
    blue: int
    alpha: int

    @classmethod
    def for_complexity(cls, normalized: float, alpha: float) -> Color:
        """Heat color for a normalized complexity in (0, 1].

        Red grows with complexity and green shrinks, so the color is purely
        red at 1 and tends to purely green as complexity approaches 0.
        """
        return cls(
            red=to_channel(normalized),
            green=to_channel(1 - normalized),
            blue=0,
            alpha=to_channel(alpha),
        )

    @property
    def hex(self) -> str:
        """``#rrggbbaa`` form used for editor background colors."""
        return "#" + "".join(f"{c:02x}" for c in (self.red, self.green, self.blue, self.alpha))

    @property
    def rgb_hex(self) -> str:
        return "#" + "".join(f"{c:02x}" for c in (self.red, self.green, self.blue))

    def as_tuple(self) -> tuple[int, int, int, int]:
        return (self.red, self.green, self.blue, self.alpha)
