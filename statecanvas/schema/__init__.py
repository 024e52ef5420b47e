"""Schema layer: diagram models and their loading."""

from .errors import SnapshotLoadError, SnapshotValidationError
from .models import DiagramSnapshot, Edge, ExportParams, InputEvent, Node
from .loader import (
    load_data,
    load_events,
    load_export_params,
    load_snapshot,
    parse_snapshot_from_string,
)

__all__ = [
    "SnapshotLoadError",
    "SnapshotValidationError",
    "DiagramSnapshot",
    "Edge",
    "ExportParams",
    "InputEvent",
    "Node",
    "load_data",
    "load_events",
    "load_export_params",
    "load_snapshot",
    "parse_snapshot_from_string",
]
