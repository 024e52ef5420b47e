"""Graph layer: the diagram's nodes and edges."""

from .diagram_graph import DiagramGraph
from .ids import IdCounter, parse_id_suffix

__all__ = [
    "DiagramGraph",
    "IdCounter",
    "parse_id_suffix",
]
