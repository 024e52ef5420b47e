"""Resolve surface coordinates to the node or edge under the pointer."""

from dataclasses import dataclass
from enum import Enum
from typing import Sequence

from ..schema.models import Edge, Node
from .paths import NODE_RADIUS, edge_geometry
from .types import LinePath, LoopPath, Point, distance

HIT_TOLERANCE = 6
ARROWHEAD_SIZE = 12
_CURVE_SAMPLES = 32


class HitKind(str, Enum):
    """What a pointer position landed on."""

    NODE = "node"
    EDGE = "edge"


@dataclass(frozen=True)
class Hit:
    """A hit-test result."""

    kind: HitKind
    target_id: str
    is_loop: bool = False


def hit_test(
    nodes: Sequence[Node],
    edges: Sequence[Edge],
    point: Point,
    tolerance: float = HIT_TOLERANCE,
) -> Hit | None:
    """Find the topmost entity under ``point``.

    Nodes are drawn above edges and later items above earlier ones, so nodes
    are checked first and both collections are scanned back to front.

    Returns:
        The hit, or None for empty surface.
    """
    point = Point(*point)

    for node in reversed(nodes):
        if distance(point, Point(node.x, node.y)) <= NODE_RADIUS:
            return Hit(HitKind.NODE, node.id)

    lookup = {node.id: node for node in nodes}
    for edge in reversed(edges):
        geometry = edge_geometry(edge, lookup)
        if geometry is None:
            continue
        if geometry.is_loop and distance(point, geometry.arrowhead.tip) <= ARROWHEAD_SIZE:
            return Hit(HitKind.EDGE, edge.id, is_loop=True)
        if distance_to_path(point, geometry.path) <= tolerance:
            return Hit(HitKind.EDGE, edge.id, is_loop=geometry.is_loop)

    return None


def distance_to_path(point: Point, path: LinePath | LoopPath) -> float:
    """Shortest distance from a point to a drawn path."""
    if isinstance(path, LinePath):
        return distance_to_segment(point, path.start, path.end)

    samples = [path.point_at(i / _CURVE_SAMPLES) for i in range(_CURVE_SAMPLES + 1)]
    return min(
        distance_to_segment(point, a, b) for a, b in zip(samples, samples[1:])
    )


def distance_to_segment(point: Point, start: Point, end: Point) -> float:
    dx = end.x - start.x
    dy = end.y - start.y
    length_sq = dx * dx + dy * dy
    if length_sq == 0:
        return distance(point, start)

    t = ((point.x - start.x) * dx + (point.y - start.y) * dy) / length_sq
    t = max(0.0, min(1.0, t))
    return distance(point, Point(start.x + t * dx, start.y + t * dy))
