"""SVG element model: circle, polyline and text."""

from __future__ import annotations

import copy
from abc import ABC, abstractmethod
from typing import List, Optional, TypeVar, final

from .context import RenderContext
from .escape import format_number, write_attr, write_escaped
from .style import PathProps
from .types_svg import Point, to_point

_O = TypeVar("_O", bound="SvgObject")


class SvgObject(ABC):
    """Base class for a single SVG tag.

    :meth:`render` handles indentation and the line break; subclasses only
    write their tag in :meth:`_render_object`.
    """

    @final
    def render(self, context: RenderContext) -> None:
        context.render_indent()
        self._render_object(context)
        context.out.write("\n")

    @abstractmethod
    def _render_object(self, context: RenderContext) -> None:
        raise NotImplementedError

    def copy(self: _O) -> _O:
        """Return an independent copy, e.g. to derive variants from a prototype."""
        return copy.deepcopy(self)


class Circle(SvgObject, PathProps):
    """The ``<circle>`` element."""

    def __init__(self) -> None:
        PathProps.__init__(self)
        self._center = Point(0.0, 0.0)
        self._radius = 1.0

    @property
    def center(self) -> Point:
        return self._center

    @property
    def radius(self) -> float:
        return self._radius

    def set_center(self, center: Point | tuple[float, float]) -> "Circle":
        self._center = to_point(center)
        return self

    def set_radius(self, radius: float) -> "Circle":
        self._radius = float(radius)
        return self

    def _render_object(self, context: RenderContext) -> None:
        out = context.out
        out.write("<circle")
        write_attr(out, "cx", self._center.x)
        write_attr(out, "cy", self._center.y)
        write_attr(out, "r", self._radius)
        self.render_attrs(out)
        out.write(" />")


class Polyline(SvgObject, PathProps):
    """The ``<polyline>`` element."""

    def __init__(self) -> None:
        PathProps.__init__(self)
        self._points: List[Point] = []

    @property
    def points(self) -> tuple[Point, ...]:
        return tuple(self._points)

    def add_point(self, point: Point | tuple[float, float]) -> "Polyline":
        self._points.append(to_point(point))
        return self

    def _render_object(self, context: RenderContext) -> None:
        out = context.out
        points = " ".join(
            f"{format_number(point.x)},{format_number(point.y)}" for point in self._points
        )
        out.write(f'<polyline points="{points}"')
        self.render_attrs(out)
        out.write(" />")


class Text(SvgObject, PathProps):
    """The ``<text>`` element. Content is stored raw and escaped on render."""

    def __init__(self) -> None:
        PathProps.__init__(self)
        self._position = Point(0.0, 0.0)
        self._offset = Point(0.0, 0.0)
        self._font_size = 1
        self._font_family: Optional[str] = None
        self._font_weight: Optional[str] = None
        self._data = ""

    @property
    def data(self) -> str:
        return self._data

    def set_position(self, pos: Point | tuple[float, float]) -> "Text":
        self._position = to_point(pos)
        return self

    def set_offset(self, offset: Point | tuple[float, float]) -> "Text":
        self._offset = to_point(offset)
        return self

    def set_font_size(self, size: int) -> "Text":
        self._font_size = size
        return self

    def set_font_family(self, font_family: Optional[str]) -> "Text":
        self._font_family = font_family
        return self

    def set_font_weight(self, font_weight: Optional[str]) -> "Text":
        self._font_weight = font_weight
        return self

    def set_data(self, data: str) -> "Text":
        self._data = data
        return self

    def _render_object(self, context: RenderContext) -> None:
        out = context.out
        out.write("<text")
        write_attr(out, "x", self._position.x)
        write_attr(out, "y", self._position.y)
        write_attr(out, "dx", self._offset.x)
        write_attr(out, "dy", self._offset.y)
        write_attr(out, "font-size", self._font_size)
        if self._font_family is not None:
            write_attr(out, "font-family", self._font_family)
        if self._font_weight is not None:
            write_attr(out, "font-weight", self._font_weight)
        self.render_attrs(out)
        out.write(">")
        write_escaped(out, self._data)
        out.write("</text>")
