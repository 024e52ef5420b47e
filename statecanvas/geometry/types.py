"""Plain geometric values produced by the geometry engine."""

import math
from dataclasses import dataclass
from typing import NamedTuple


class Point(NamedTuple):
    """A position on the drawing surface (y grows downward)."""

    x: float
    y: float


def distance(a: Point, b: Point) -> float:
    return math.hypot(b.x - a.x, b.y - a.y)


def polar(center: Point, radius: float, angle: float) -> Point:
    """Point at ``radius`` from ``center`` in direction ``angle`` (radians)."""
    return Point(center.x + radius * math.cos(angle), center.y + radius * math.sin(angle))


def _fmt(value: float) -> str:
    return f"{value:.2f}".rstrip("0").rstrip(".")


@dataclass(frozen=True)
class LinePath:
    """A straight stroke from ``start`` to ``end``."""

    start: Point
    end: Point

    @property
    def length(self) -> float:
        return distance(self.start, self.end)

    def to_svg(self) -> str:
        return (
            f"M {_fmt(self.start.x)} {_fmt(self.start.y)} "
            f"L {_fmt(self.end.x)} {_fmt(self.end.y)}"
        )


@dataclass(frozen=True)
class LoopPath:
    """A cubic Bézier curve leaving and re-entering the same node."""

    start: Point
    control1: Point
    control2: Point
    end: Point

    def point_at(self, t: float) -> Point:
        """Evaluate the curve at parameter ``t`` in [0, 1]."""
        u = 1 - t
        a, b, c, d = u**3, 3 * u * u * t, 3 * u * t * t, t**3
        return Point(
            a * self.start.x + b * self.control1.x + c * self.control2.x + d * self.end.x,
            a * self.start.y + b * self.control1.y + c * self.control2.y + d * self.end.y,
        )

    def to_svg(self) -> str:
        return (
            f"M {_fmt(self.start.x)} {_fmt(self.start.y)} "
            f"C {_fmt(self.control1.x)} {_fmt(self.control1.y)}, "
            f"{_fmt(self.control2.x)} {_fmt(self.control2.y)}, "
            f"{_fmt(self.end.x)} {_fmt(self.end.y)}"
        )


@dataclass(frozen=True)
class Arrowhead:
    """Arrow glyph: its tip and the direction it points in (degrees)."""

    tip: Point
    angle: float

    def polygon(self, size: float) -> tuple[Point, Point, Point]:
        """Triangle vertices for a glyph ``size`` units long."""
        back = math.radians(self.angle + 180)
        spread = math.radians(25)
        return (
            self.tip,
            polar(self.tip, size, back - spread),
            polar(self.tip, size, back + spread),
        )


@dataclass(frozen=True)
class EdgeGeometry:
    """Everything a renderer needs to draw one edge."""

    path: LinePath | LoopPath
    label_anchor: Point
    is_loop: bool
    arrowhead: Arrowhead
