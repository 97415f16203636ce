"""SVG value type definitions."""

from __future__ import annotations

from enum import Enum
from typing import NamedTuple


class Point(NamedTuple):
    x: float = 0.0
    y: float = 0.0


class StrokeLineCap(Enum):
    BUTT = "butt"
    ROUND = "round"
    SQUARE = "square"


class StrokeLineJoin(Enum):
    ARCS = "arcs"
    BEVEL = "bevel"
    MITER = "miter"
    MITER_CLIP = "miter-clip"
    ROUND = "round"


def line_cap_text(value: object) -> str | None:
    """Canonical text for a line cap, or None when the value is not a known cap."""
    if isinstance(value, StrokeLineCap):
        return value.value
    return None


def line_join_text(value: object) -> str | None:
    """Canonical text for a line join, or None when the value is not a known join."""
    if isinstance(value, StrokeLineJoin):
        return value.value
    return None


def to_point(value: Point | tuple[float, float]) -> Point:
    """Coerce a coordinate pair to a Point of floats."""
    x, y = value
    return Point(float(x), float(y))
