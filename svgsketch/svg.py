"""A small object model for building and rendering SVG documents."""

from __future__ import annotations

import copy
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, List, Optional, TextIO, Union


def _num(value: float) -> str:
    """Format a number the way a default-precision stream would."""
    return f"{value:g}"


def _check_channel(name: str, value: int) -> None:
    if not 0 <= value <= 255:
        raise ValueError(f"{name} must be in range 0..255, got {value}")


@dataclass(frozen=True)
class Rgb:
    """An opaque colour given by its red, green and blue channels."""

    red: int
    green: int
    blue: int

    def __post_init__(self) -> None:
        _check_channel("red", self.red)
        _check_channel("green", self.green)
        _check_channel("blue", self.blue)


@dataclass(frozen=True)
class Rgba:
    """A colour with red, green and blue channels and an opacity."""

    red: int
    green: int
    blue: int
    opacity: float

    def __post_init__(self) -> None:
        _check_channel("red", self.red)
        _check_channel("green", self.green)
        _check_channel("blue", self.blue)


# None means "no colour" and renders as "none".
Color = Union[None, str, Rgb, Rgba]


class StrokeLineCap(Enum):
    BUTT = "butt"
    ROUND = "round"
    SQUARE = "square"

    def __str__(self) -> str:
        return self.value


class StrokeLineJoin(Enum):
    ARCS = "arcs"
    BEVEL = "bevel"
    MITER = "miter"
    MITER_CLIP = "miter-clip"
    ROUND = "round"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Point:
    x: float = 0.0
    y: float = 0.0


@dataclass(frozen=True)
class RenderContext:
    """Output stream together with the current indent and indent step."""

    out: TextIO
    indent_step: int = 0
    indent: int = 0

    def indented(self) -> RenderContext:
        """Return a context indented one step further."""
        return RenderContext(self.out, self.indent_step, self.indent + self.indent_step)

    def render_indent(self) -> None:
        """Write the current indent as spaces."""
        self.out.write(" " * self.indent)


def format_color(property_name: str, color: Color) -> str:
    """Render a colour as an attribute, with a leading space."""
    if color is None:
        text = "none"
    elif isinstance(color, str):
        text = color
    elif isinstance(color, Rgb):
        text = f"rgb({color.red},{color.green},{color.blue})"
    elif isinstance(color, Rgba):
        text = f"rgba({color.red},{color.green},{color.blue},{_num(color.opacity)})"
    else:
        raise TypeError(f"unsupported colour value: {color!r}")
    return f' {property_name}="{text}"'


class Object(ABC):
    """A single SVG element that can render itself on one line."""

    def render(self, context: RenderContext) -> None:
        """Write the element indented and followed by a newline."""
        context.render_indent()
        self.render_object(context)
        context.out.write("\n")

    @abstractmethod
    def render_object(self, context: RenderContext) -> None:
        """Write the element's tag to the context's stream."""


@dataclass(kw_only=True)
class PathProps:
    """Fill and stroke properties shared by path-like elements."""

    fill_color: Color = None
    stroke_color: Color = None
    stroke_width: Optional[float] = None
    stroke_linecap: Optional[StrokeLineCap] = None
    stroke_linejoin: Optional[StrokeLineJoin] = None

    def render_attrs(self) -> str:
        """Return the fill and stroke attributes, each with a leading space."""
        parts = [
            format_color("fill", self.fill_color),
            format_color("stroke", self.stroke_color),
        ]
        if self.stroke_width is not None:
            parts.append(f' stroke-width="{_num(self.stroke_width)}"')
        if self.stroke_linecap is not None:
            parts.append(f' stroke-linecap="{self.stroke_linecap}"')
        if self.stroke_linejoin is not None:
            parts.append(f' stroke-linejoin="{self.stroke_linejoin}"')
        return "".join(parts)


@dataclass
class Circle(Object, PathProps):
    """The <circle> element."""

    center: Point = field(default_factory=Point)
    radius: float = 1.0

    def render_object(self, context: RenderContext) -> None:
        context.out.write(
            f'<circle cx="{_num(self.center.x)}" cy="{_num(self.center.y)}" '
            f'r="{_num(self.radius)}" {self.render_attrs()}/>'
        )


@dataclass
class Polyline(Object, PathProps):
    """The <polyline> element."""

    points: List[Point] = field(default_factory=list)

    def add_point(self, point: Point) -> Polyline:
        """Append a vertex and return the polyline."""
        self.points.append(point)
        return self

    def render_object(self, context: RenderContext) -> None:
        coords = "".join(f"{_num(p.x)},{_num(p.y)} " for p in self.points)
        context.out.write(f'<polyline points="{coords}"{self.render_attrs()}/>')


_TEXT_ESCAPES = str.maketrans(
    {'"': "&quot;", "<": "&lt;", ">": "&gt;", "'": "&apos;", "&": "&amp;"}
)


@dataclass
class Text(Object, PathProps):
    """The <text> element."""

    position: Point = field(default_factory=Point)
    offset: Point = field(default_factory=Point)
    font_size: int = 1
    font_family: Optional[str] = None
    font_weight: Optional[str] = None
    data: Optional[str] = None

    def __post_init__(self) -> None:
        if self.font_size < 0:
            raise ValueError(f"font size must not be negative, got {self.font_size}")

    def render_object(self, context: RenderContext) -> None:
        parts = [
            "<text",
            f' x="{_num(self.position.x)}"',
            f' y="{_num(self.position.y)}"',
            f' dx="{_num(self.offset.x)}"',
            f' dy="{_num(self.offset.y)}"',
            f' font-size="{int(self.font_size)}"',
        ]
        if self.font_family is not None:
            parts.append(f' font-family="{self.font_family}"')
        if self.font_weight is not None:
            parts.append(f' font-weight="{self.font_weight}"')
        parts.append(self.render_attrs())
        parts.append(">")
        if self.data is not None:
            parts.append(self.data.translate(_TEXT_ESCAPES))
        parts.append("</text>")
        context.out.write("".join(parts))


class ObjectContainer(ABC):
    """Anything that SVG objects can be added to."""

    @abstractmethod
    def add(self, obj: Object) -> None:
        """Add an SVG object."""


class Drawable(ABC):
    """A picture element that draws itself into a container."""

    @abstractmethod
    def draw(self, container: ObjectContainer) -> None:
        """Add the objects making up this drawable to the container."""


class Document(ObjectContainer):
    """An SVG document holding a sequence of objects."""

    def __init__(self) -> None:
        self._objects: List[Object] = []

    def add(self, obj: Object) -> None:
        """Add a copy of the object to the document."""
        if not isinstance(obj, Object):
            raise TypeError(f"expected an SVG object, got {type(obj).__name__}")
        self._objects.append(copy.deepcopy(obj))

    def __iter__(self) -> Iterator[Object]:
        return iter(self._objects)

    def __len__(self) -> int:
        return len(self._objects)

    def render(self, out: TextIO) -> None:
        """Write the whole document as SVG to the stream."""
        out.write('<?xml version="1.0" encoding="UTF-8" ?>\n')
        out.write('<svg xmlns="http://www.w3.org/2000/svg" version="1.1">\n')
        context = RenderContext(out, 2, 2)
        for obj in self._objects:
            obj.render(context)
        out.write("</svg>\n")