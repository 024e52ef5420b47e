"""Derive edge paths, arrowheads and label anchors from node positions."""

import math
from typing import Iterable, Mapping

from ..schema.models import Edge, Node
from .types import Arrowhead, EdgeGeometry, LinePath, LoopPath, Point, polar

NODE_RADIUS = 30
LABEL_OFFSET = 15

DEFAULT_LOOP_ANGLE = -90.0  # degrees; straight up on a y-down surface
LOOP_SPREAD = 0.7  # radians either side of the loop angle
LOOP_CONTROL_RADIUS = 80
LOOP_LABEL_RADIUS = 100
LOOP_ARROW_RADIUS = 36

NodeLookup = Mapping[str, Node] | Iterable[Node]


def node_center(node: Node) -> Point:
    return Point(node.x, node.y)


def edge_geometry(edge: Edge, nodes: NodeLookup) -> EdgeGeometry | None:
    """Compute the drawable geometry of an edge.

    Args:
        edge: The edge to lay out.
        nodes: Nodes keyed by id, or any iterable of nodes.

    Returns:
        The edge geometry, or None if an endpoint is missing.
    """
    lookup = _as_mapping(nodes)
    source = lookup.get(edge.source)
    target = lookup.get(edge.target)
    if source is None or target is None:
        return None

    if edge.is_loop:
        return loop_geometry(source, edge.loop_angle)
    return line_geometry(source, target)


def line_geometry(source: Node, target: Node) -> EdgeGeometry:
    """Straight edge trimmed by the node radius at both ends.

    The label sits ``LABEL_OFFSET`` units from the midpoint, always on the
    counter-clockwise side of the direction of travel. Coincident nodes give
    a zero-length path at their shared center.
    """
    start = node_center(source)
    end = node_center(target)
    dx = end.x - start.x
    dy = end.y - start.y
    dist = math.hypot(dx, dy)

    if dist == 0:
        return EdgeGeometry(
            path=LinePath(start, start),
            label_anchor=start,
            is_loop=False,
            arrowhead=Arrowhead(start, 0.0),
        )

    ux = dx / dist
    uy = dy / dist
    path_start = Point(start.x + ux * NODE_RADIUS, start.y + uy * NODE_RADIUS)
    path_end = Point(end.x - ux * NODE_RADIUS, end.y - uy * NODE_RADIUS)

    mid = Point((path_start.x + path_end.x) / 2, (path_start.y + path_end.y) / 2)
    anchor = Point(mid.x - uy * LABEL_OFFSET, mid.y + ux * LABEL_OFFSET)

    return EdgeGeometry(
        path=LinePath(path_start, path_end),
        label_anchor=anchor,
        is_loop=False,
        arrowhead=Arrowhead(path_end, math.degrees(math.atan2(dy, dx))),
    )


def loop_geometry(node: Node, loop_angle: float | None = None) -> EdgeGeometry:
    """Self-loop anchored on the node boundary in the ``loop_angle`` direction.

    Angles are in degrees, 0 pointing right and growing toward +y. The curve,
    its arrowhead and the label anchor all rotate with the angle.
    """
    angle_deg = DEFAULT_LOOP_ANGLE if loop_angle is None else loop_angle
    theta = math.radians(angle_deg)
    center = node_center(node)

    start = polar(center, NODE_RADIUS, theta)
    path = LoopPath(
        start=start,
        control1=polar(center, LOOP_CONTROL_RADIUS, theta - LOOP_SPREAD),
        control2=polar(center, LOOP_CONTROL_RADIUS, theta + LOOP_SPREAD),
        end=start,
    )

    return EdgeGeometry(
        path=path,
        label_anchor=polar(center, LOOP_LABEL_RADIUS, theta),
        is_loop=True,
        arrowhead=Arrowhead(polar(center, LOOP_ARROW_RADIUS, theta), angle_deg + 180),
    )


def connect_preview(node: Node, pointer: Point) -> LinePath:
    """Rubber-band line from a node center to the pointer."""
    return LinePath(node_center(node), Point(*pointer))


def loop_angle_towards(node: Node, pointer: Point) -> float:
    """Angle in degrees from a node center to the pointer."""
    return math.degrees(math.atan2(pointer[1] - node.y, pointer[0] - node.x))


def _as_mapping(nodes: NodeLookup) -> Mapping[str, Node]:
    if isinstance(nodes, Mapping):
        return nodes
    return {node.id: node for node in nodes}
