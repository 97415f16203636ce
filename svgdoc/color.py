"""Colour values accepted by fill and stroke attributes."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional, Union, overload

from .escape import format_number

NONE_COLOR = "none"


@dataclass(frozen=True)
class Rgb:
    red: int = 0
    green: int = 0
    blue: int = 0

    def __str__(self) -> str:
        return f"rgb({self.red},{self.green},{self.blue})"


@dataclass(frozen=True)
class Rgba:
    red: int = 0
    green: int = 0
    blue: int = 0
    opacity: float = 1.0

    def __str__(self) -> str:
        return f"rgba({self.red},{self.green},{self.blue},{format_number(self.opacity)})"


Color = Union[str, Rgb, Rgba]
OptionalColor = Optional[Color]


def color_to_text(color: Color) -> str:
    """Return the attribute text for a colour token or value."""
    return str(color)


@overload
def lerp(start: int, end: int, t: float) -> int: ...


@overload
def lerp(start: Rgb, end: Rgb, t: float) -> Rgb: ...


def lerp(start, end, t):
    """Linearly interpolate channels from ``start`` to ``end`` at ``t``."""
    if isinstance(start, Rgb) and isinstance(end, Rgb):
        return Rgb(
            lerp(start.red, end.red, t),
            lerp(start.green, end.green, t),
            lerp(start.blue, end.blue, t),
        )
    value = (end - start) * t + start
    # Halves round away from zero.
    return int(math.copysign(math.floor(abs(value) + 0.5), value))
