"""Geometry engine: pure layout of edges, loops and hit areas."""

from .hit_test import Hit, HitKind, hit_test
from .paths import (
    DEFAULT_LOOP_ANGLE,
    LABEL_OFFSET,
    NODE_RADIUS,
    connect_preview,
    edge_geometry,
    line_geometry,
    loop_angle_towards,
    loop_geometry,
)
from .types import Arrowhead, EdgeGeometry, LinePath, LoopPath, Point

__all__ = [
    "Hit",
    "HitKind",
    "hit_test",
    "DEFAULT_LOOP_ANGLE",
    "LABEL_OFFSET",
    "NODE_RADIUS",
    "connect_preview",
    "edge_geometry",
    "line_geometry",
    "loop_angle_towards",
    "loop_geometry",
    "Arrowhead",
    "EdgeGeometry",
    "LinePath",
    "LoopPath",
    "Point",
]
