"""Composite shapes that decompose into primitive SVG elements."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from typing import Iterable

from .color import Rgb
from .document import ObjectContainer
from .elements import Circle, Polyline
from .types_svg import Point, to_point


class Drawable(ABC):
    @abstractmethod
    def draw(self, container: ObjectContainer) -> None:
        raise NotImplementedError


def create_star(center: Point, outer_rad: float, inner_rad: float, num_rays: int) -> Polyline:
    """Build a closed star outline, alternating outer and inner vertices.

    The first ray points straight up; the outline ends back on the first
    outer vertex. Fewer than one ray gives an empty polyline.
    """
    polyline = Polyline()
    if num_rays < 1:
        return polyline
    for i in range(num_rays + 1):
        angle = 2 * math.pi * (i % num_rays) / num_rays
        polyline.add_point(
            Point(center.x + outer_rad * math.sin(angle), center.y - outer_rad * math.cos(angle))
        )
        if i == num_rays:
            break
        angle += math.pi / num_rays
        polyline.add_point(
            Point(center.x + inner_rad * math.sin(angle), center.y - inner_rad * math.cos(angle))
        )
    return polyline


class Triangle(Drawable):
    def __init__(self, p1: Point, p2: Point, p3: Point) -> None:
        self._p1 = to_point(p1)
        self._p2 = to_point(p2)
        self._p3 = to_point(p3)

    def draw(self, container: ObjectContainer) -> None:
        container.add(
            Polyline().add_point(self._p1).add_point(self._p2).add_point(self._p3).add_point(self._p1)
        )


class Star(Drawable):
    def __init__(self, center: Point, outer_radius: float, inner_radius: float, num_rays: int) -> None:
        self._center = to_point(center)
        self._outer_radius = outer_radius
        self._inner_radius = inner_radius
        self._num_rays = num_rays

    def draw(self, container: ObjectContainer) -> None:
        if self._num_rays < 1:
            return
        container.add(
            create_star(self._center, self._outer_radius, self._inner_radius, self._num_rays)
            .set_fill_color("red")
            .set_stroke_color("black")
        )


class Snowman(Drawable):
    """Three stacked circles, drawn from the bottom one up to the head."""

    def __init__(self, head_center: Point, head_radius: float) -> None:
        self._head_center = to_point(head_center)
        self._head_radius = head_radius

    def draw(self, container: ObjectContainer) -> None:
        x, y = self._head_center
        r = self._head_radius
        base_circle = Circle().set_fill_color(Rgb(240, 240, 240)).set_stroke_color("black")
        container.add(base_circle.copy().set_center(Point(x, y + 5 * r)).set_radius(2 * r))
        container.add(base_circle.copy().set_center(Point(x, y + 2 * r)).set_radius(1.5 * r))
        container.add(base_circle.copy().set_center(self._head_center).set_radius(r))


def draw_picture(drawables: Iterable[Drawable], target: ObjectContainer) -> None:
    """Draw every drawable into ``target`` in iteration order."""
    for drawable in drawables:
        drawable.draw(target)
