"""Composite drawings built from SVG primitives, and a sample picture."""

from __future__ import annotations

import argparse
import math
from dataclasses import dataclass, replace
from typing import Iterable, Iterator, Optional, Sequence

from .svg import (
    Circle,
    Document,
    Drawable,
    ObjectContainer,
    Point,
    Polyline,
    Rgb,
    StrokeLineCap,
    StrokeLineJoin,
    Text,
)


@dataclass
class Star(Drawable):
    """A star with alternating outer and inner vertices."""

    center: Point
    outer_radius: float
    inner_radius: float
    num_rays: int

    def __post_init__(self) -> None:
        if self.num_rays <= 0:
            raise ValueError(f"a star needs at least one ray, got {self.num_rays}")

    def _on_circle(self, radius: float, angle: float) -> Point:
        return Point(
            self.center.x + radius * math.sin(angle),
            self.center.y - radius * math.cos(angle),
        )

    def _vertices(self) -> Iterator[Point]:
        half_step = math.pi / self.num_rays
        for i in range(self.num_rays + 1):
            angle = 2 * math.pi * (i % self.num_rays) / self.num_rays
            yield self._on_circle(self.outer_radius, angle)
            if i < self.num_rays:
                yield self._on_circle(self.inner_radius, angle + half_step)

    def draw(self, container: ObjectContainer) -> None:
        container.add(
            Polyline(points=list(self._vertices()), fill_color="red", stroke_color="black")
        )


@dataclass
class Snowman(Drawable):
    """Three stacked circles, largest at the bottom."""

    head_center: Point
    head_radius: float

    def draw(self, container: ObjectContainer) -> None:
        x, y, r = self.head_center.x, self.head_center.y, self.head_radius
        for center, radius in (
            (Point(x, y + r * 5), r * 2.0),
            (Point(x, y + r * 2), r * 1.5),
            (self.head_center, r),
        ):
            container.add(
                Circle(
                    center=center,
                    radius=radius,
                    fill_color="rgb(240,240,240)",
                    stroke_color="black",
                )
            )


@dataclass
class Triangle(Drawable):
    """A filled triangle given by its three corners."""

    p1: Point
    p2: Point
    p3: Point

    def draw(self, container: ObjectContainer) -> None:
        container.add(
            Polyline(
                points=[self.p1, self.p2, self.p3, self.p1],
                fill_color=Rgb(12, 42, 122),
            )
        )


def draw_picture(drawables: Iterable[Drawable], target: ObjectContainer) -> None:
    """Draw every drawable into the target, in order."""
    for drawable in drawables:
        drawable.draw(target)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Render the sample picture to an SVG file."""
    parser = argparse.ArgumentParser(description="Render a sample SVG picture.")
    parser.add_argument("output", nargs="?", default="file.svg", help="output file")
    args = parser.parse_args(argv)

    picture = [
        Triangle(Point(100, 20), Point(120, 50), Point(80, 40)),
        Star(Point(50.0, 20.0), 10.0, 4.0, 5),
        Snowman(Point(30, 20), 10.0),
    ]

    doc = Document()
    draw_picture(picture, doc)

    base_text = Text(
        font_family="Verdana",
        font_size=12,
        position=Point(10, 100),
        data="Happy New Year!",
    )
    doc.add(
        replace(
            base_text,
            stroke_color="yellow",
            fill_color="yellow",
            stroke_linejoin=StrokeLineJoin.ROUND,
            stroke_linecap=StrokeLineCap.ROUND,
            stroke_width=3,
        )
    )
    doc.add(replace(base_text, fill_color="red"))

    with open(args.output, "w", encoding="utf-8") as out:
        doc.render(out)
    return 0