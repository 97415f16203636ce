"""Scene loading and document assembly."""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Dict, List

from pydantic import ValidationError

from .color import Rgb, lerp
from .document import Document
from .elements import Circle, Polyline, SvgObject, Text
from .io_utils import read_yaml
from .models import (
    CircleSpec,
    PolylineSpec,
    SceneSpec,
    SnowmanSpec,
    StarSpec,
    StyleSpec,
    TextSpec,
    TriangleSpec,
)
from .shapes import Drawable, Snowman, Star, Triangle, draw_picture
from .style import PathProps
from .types_svg import Point, StrokeLineCap, StrokeLineJoin


class SceneError(ValueError):
    """Raised when a scene file does not describe a valid scene."""


def load_scene(path: Path) -> SceneSpec:
    if not path.exists():
        raise FileNotFoundError(f"Scene file not found: {path}")
    data = read_yaml(path) or {}
    if not isinstance(data, dict):
        raise SceneError(f"{path}: scene must be a mapping with an 'items' list")
    try:
        return SceneSpec.model_validate(data)
    except ValidationError as exc:
        raise SceneError(f"Invalid scene in {path}: {exc}") from exc


def _apply_style(shape: PathProps, style: StyleSpec) -> None:
    shape.set_fill_color(style.fill_color())
    shape.set_stroke_color(style.stroke_color())
    shape.set_stroke_width(style.stroke_width)
    shape.set_stroke_line_cap(style.line_cap)
    shape.set_stroke_line_join(style.line_join)


def _build_circle(spec: CircleSpec) -> Circle:
    circle = Circle().set_center(spec.center.to_point()).set_radius(spec.radius)
    _apply_style(circle, spec.style)
    return circle


def _build_polyline(spec: PolylineSpec) -> Polyline:
    polyline = Polyline()
    for point in spec.points:
        polyline.add_point(point.to_point())
    _apply_style(polyline, spec.style)
    return polyline


def _build_text(spec: TextSpec) -> Text:
    text = (
        Text()
        .set_position(spec.position.to_point())
        .set_offset(spec.offset.to_point())
        .set_font_size(spec.font_size)
        .set_font_family(spec.font_family)
        .set_font_weight(spec.font_weight)
        .set_data(spec.data)
    )
    _apply_style(text, spec.style)
    return text


_PRIMITIVE_BUILDERS: Dict[type, Callable] = {
    CircleSpec: _build_circle,
    PolylineSpec: _build_polyline,
    TextSpec: _build_text,
}


def _build_drawable(spec) -> Drawable:
    if isinstance(spec, TriangleSpec):
        return Triangle(spec.p1.to_point(), spec.p2.to_point(), spec.p3.to_point())
    if isinstance(spec, StarSpec):
        return Star(spec.center.to_point(), spec.outer_radius, spec.inner_radius, spec.num_rays)
    if isinstance(spec, SnowmanSpec):
        return Snowman(spec.head_center.to_point(), spec.head_radius)
    raise SceneError(f"unsupported scene item: {type(spec).__name__}")


def build_document(scene: SceneSpec) -> Document:
    """Assemble a document from a scene, keeping item order."""
    doc = Document()
    for item in scene.items:
        builder = _PRIMITIVE_BUILDERS.get(type(item))
        if builder is not None:
            obj: SvgObject = builder(item)
            # Freshly built, nothing else holds a reference.
            doc.add_ptr(obj)
        else:
            draw_picture([_build_drawable(item)], doc)
    return doc


def picture_document() -> Document:
    """Triangle, star and snowman drawn in that order."""
    picture: List[Drawable] = [
        Triangle(Point(100, 20), Point(120, 50), Point(80, 40)),
        Star(Point(50.0, 20.0), 10.0, 4.0, 5),
        Snowman(Point(30, 20), 10.0),
    ]
    doc = Document()
    draw_picture(picture, doc)
    return doc


def greeting_document() -> Document:
    """Two greeting lines derived from one prototype text."""
    base_text = (
        Text()
        .set_font_family("Verdana")
        .set_font_size(12)
        .set_position(Point(10, 100))
        .set_data("Happy New Year!")
    )
    doc = Document()
    doc.add(
        base_text.copy()
        .set_stroke_color("yellow")
        .set_fill_color("yellow")
        .set_stroke_line_join(StrokeLineJoin.ROUND)
        .set_stroke_line_cap(StrokeLineCap.ROUND)
        .set_stroke_width(3)
    )
    doc.add(base_text.copy().set_fill_color("red"))
    return doc


def gradient_document(num_circles: int = 10) -> Document:
    """A row of circles whose fill fades from green to blue."""
    start_color = Rgb(0, 255, 30)
    end_color = Rgb(20, 20, 150)
    doc = Document()
    for i in range(num_circles):
        t = i / (num_circles - 1) if num_circles > 1 else 0.0
        doc.add(
            Circle()
            .set_fill_color(lerp(start_color, end_color, t))
            .set_stroke_color("black")
            .set_center(Point(i * 20.0 + 40, 40.0))
            .set_radius(15)
        )
    return doc


DEMOS: Dict[str, Callable[[], Document]] = {
    "picture": picture_document,
    "greeting": greeting_document,
    "gradient": gradient_document,
}
