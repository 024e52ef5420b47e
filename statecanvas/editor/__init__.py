"""Interactive editing state machine."""

from .errors import EditorContextError
from .modes import (
    IDLE,
    NO_SELECTION,
    Connecting,
    Dragging,
    DraggingLoop,
    EdgeSelected,
    EditingEdge,
    EditingNode,
    Idle,
    InteractionMode,
    NodeSelected,
    NoSelection,
    Selection,
)
from .replay import apply_event, apply_events
from .session import KEY_DELETE, KEY_ENTER, KEY_ESCAPE, EditorSession

__all__ = [
    "EditorContextError",
    "EditorSession",
    "apply_event",
    "apply_events",
    "KEY_DELETE",
    "KEY_ENTER",
    "KEY_ESCAPE",
    "IDLE",
    "NO_SELECTION",
    "Connecting",
    "Dragging",
    "DraggingLoop",
    "EdgeSelected",
    "EditingEdge",
    "EditingNode",
    "Idle",
    "InteractionMode",
    "NodeSelected",
    "NoSelection",
    "Selection",
]
