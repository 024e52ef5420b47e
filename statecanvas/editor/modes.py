"""Interaction modes and selection for the editor session.

The session is always in exactly one mode, and the selection is tracked
separately, so contradictory combinations (dragging while connecting,
editing a node and an edge at once) cannot be represented.
"""

from dataclasses import dataclass

from ..geometry.types import Point


@dataclass(frozen=True)
class Idle:
    """No gesture in progress."""


@dataclass(frozen=True)
class Dragging:
    """A node follows the pointer."""

    node_id: str


@dataclass(frozen=True)
class Connecting:
    """A transition is being drawn from ``source_id`` toward the pointer."""

    source_id: str
    preview: Point


@dataclass(frozen=True)
class DraggingLoop:
    """A self-loop's angle follows the pointer."""

    edge_id: str


@dataclass(frozen=True)
class EditingNode:
    """A node label is being typed."""

    node_id: str
    draft: str = ""


@dataclass(frozen=True)
class EditingEdge:
    """An edge label is being typed."""

    edge_id: str
    draft: str = ""


InteractionMode = Idle | Dragging | Connecting | DraggingLoop | EditingNode | EditingEdge


@dataclass(frozen=True)
class NoSelection:
    pass


@dataclass(frozen=True)
class NodeSelected:
    node_id: str


@dataclass(frozen=True)
class EdgeSelected:
    edge_id: str


Selection = NoSelection | NodeSelected | EdgeSelected

IDLE = Idle()
NO_SELECTION = NoSelection()
