"""Shared fill and stroke attributes for SVG shapes."""

from __future__ import annotations

from typing import Optional, TextIO, TypeVar

from .color import OptionalColor, color_to_text
from .escape import write_attr
from .types_svg import StrokeLineCap, StrokeLineJoin, line_cap_text, line_join_text

_P = TypeVar("_P", bound="PathProps")


class PathProps:
    """Mixin holding the optional presentation attributes of a shape.

    Every setter returns ``self`` typed as the concrete class it was called on,
    so ``Circle().set_fill_color("red").set_radius(3)`` keeps the Circle API
    available after a style call.
    """

    def __init__(self) -> None:
        self._fill_color: OptionalColor = None
        self._stroke_color: OptionalColor = None
        self._stroke_width: Optional[float] = None
        self._line_cap: Optional[StrokeLineCap] = None
        self._line_join: Optional[StrokeLineJoin] = None

    def set_fill_color(self: _P, color: OptionalColor) -> _P:
        self._fill_color = color
        return self

    def set_stroke_color(self: _P, color: OptionalColor) -> _P:
        self._stroke_color = color
        return self

    def set_stroke_width(self: _P, width: Optional[float]) -> _P:
        self._stroke_width = None if width is None else float(width)
        return self

    def set_stroke_line_cap(self: _P, line_cap: Optional[StrokeLineCap]) -> _P:
        self._line_cap = line_cap
        return self

    def set_stroke_line_join(self: _P, line_join: Optional[StrokeLineJoin]) -> _P:
        self._line_join = line_join
        return self

    def render_attrs(self, out: TextIO) -> None:
        """Write the attributes that are set, in fixed order."""
        if self._fill_color is not None:
            write_attr(out, "fill", color_to_text(self._fill_color))
        if self._stroke_color is not None:
            write_attr(out, "stroke", color_to_text(self._stroke_color))
        if self._stroke_width is not None:
            write_attr(out, "stroke-width", self._stroke_width)
        cap = line_cap_text(self._line_cap)
        if cap is not None:
            write_attr(out, "stroke-linecap", cap)
        join = line_join_text(self._line_join)
        if join is not None:
            write_attr(out, "stroke-linejoin", join)
