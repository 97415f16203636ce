"""Pydantic models for YAML scene descriptions."""

from typing import Annotated, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from .color import Color, Rgb, Rgba
from .types_svg import Point, StrokeLineCap, StrokeLineJoin


class PointSpec(BaseModel):
    """A coordinate pair in user units."""

    x: float = 0.0
    y: float = 0.0

    def to_point(self) -> Point:
        return Point(self.x, self.y)


class RgbSpec(BaseModel):
    red: int = Field(0, ge=0, le=255)
    green: int = Field(0, ge=0, le=255)
    blue: int = Field(0, ge=0, le=255)
    opacity: Optional[float] = Field(
        None, ge=0.0, le=1.0, description="When given, the colour renders as rgba()."
    )

    def to_color(self) -> Color:
        if self.opacity is None:
            return Rgb(self.red, self.green, self.blue)
        return Rgba(self.red, self.green, self.blue, self.opacity)


ColorSpec = Union[str, RgbSpec]


def _resolve_color(spec: Optional[ColorSpec]) -> Optional[Color]:
    if spec is None or isinstance(spec, str):
        return spec
    return spec.to_color()


class StyleSpec(BaseModel):
    """Optional fill and stroke attributes shared by every shape."""

    model_config = ConfigDict(populate_by_name=True)

    fill: Optional[ColorSpec] = Field(None, description="Fill colour token or rgb channels.")
    stroke: Optional[ColorSpec] = Field(None, description="Stroke colour token or rgb channels.")
    stroke_width: Optional[float] = Field(None, alias="strokeWidth")
    line_cap: Optional[StrokeLineCap] = Field(None, alias="lineCap")
    line_join: Optional[StrokeLineJoin] = Field(None, alias="lineJoin")

    def fill_color(self) -> Optional[Color]:
        return _resolve_color(self.fill)

    def stroke_color(self) -> Optional[Color]:
        return _resolve_color(self.stroke)


class CircleSpec(BaseModel):
    kind: Literal["circle"]
    center: PointSpec = Field(default_factory=PointSpec)
    radius: float = 1.0
    style: StyleSpec = Field(default_factory=StyleSpec)


class PolylineSpec(BaseModel):
    kind: Literal["polyline"]
    points: List[PointSpec] = Field(default_factory=list)
    style: StyleSpec = Field(default_factory=StyleSpec)


class TextSpec(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    kind: Literal["text"]
    position: PointSpec = Field(default_factory=PointSpec)
    offset: PointSpec = Field(default_factory=PointSpec)
    font_size: int = Field(1, ge=0, alias="fontSize")
    font_family: Optional[str] = Field(None, alias="fontFamily")
    font_weight: Optional[str] = Field(None, alias="fontWeight")
    data: str = ""
    style: StyleSpec = Field(default_factory=StyleSpec)


class TriangleSpec(BaseModel):
    kind: Literal["triangle"]
    p1: PointSpec
    p2: PointSpec
    p3: PointSpec


class StarSpec(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    kind: Literal["star"]
    center: PointSpec
    outer_radius: float = Field(..., alias="outerRadius")
    inner_radius: float = Field(..., alias="innerRadius")
    num_rays: int = Field(5, ge=1, alias="numRays")


class SnowmanSpec(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    kind: Literal["snowman"]
    head_center: PointSpec = Field(..., alias="headCenter")
    head_radius: float = Field(..., alias="headRadius")


ItemSpec = Annotated[
    Union[CircleSpec, PolylineSpec, TextSpec, TriangleSpec, StarSpec, SnowmanSpec],
    Field(discriminator="kind"),
]


class SceneSpec(BaseModel):
    """Ordered list of primitives and composite shapes forming one document."""

    name: Optional[str] = Field(None, description="Human readable scene name.")
    items: List[ItemSpec] = Field(
        default_factory=list, description="Items in render order."
    )
