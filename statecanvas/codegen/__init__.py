"""Diagram code generation."""

from .preview import ExportPreview
from .tikz import EMPTY_PLACEHOLDER, generate_tikz, group_edges_by_source, should_swap_label

__all__ = [
    "EMPTY_PLACEHOLDER",
    "ExportPreview",
    "generate_tikz",
    "group_edges_by_source",
    "should_swap_label",
]
