"""Reference integrity validator."""

from collections import Counter

from ..schema.models import DiagramSnapshot
from .base import ValidationResult


def check_reference_integrity(snapshot: DiagramSnapshot) -> ValidationResult:
    """Check that ids are unique and every edge endpoint is a defined node.

    Args:
        snapshot: The loaded diagram.

    Returns:
        ValidationResult with errors for duplicate ids and broken references.
    """
    result = ValidationResult()

    node_counts = Counter(node.id for node in snapshot.nodes)
    for node_id, count in node_counts.items():
        if count > 1:
            result.add_error(
                code="DUPLICATE_NODE_ID",
                message=f"Node id '{node_id}' is used {count} times",
                node=node_id,
                count=count,
            )

    edge_counts = Counter(edge.id for edge in snapshot.edges)
    for edge_id, count in edge_counts.items():
        if count > 1:
            result.add_error(
                code="DUPLICATE_EDGE_ID",
                message=f"Edge id '{edge_id}' is used {count} times",
                edge=edge_id,
                count=count,
            )

    defined = set(node_counts)
    for edge in snapshot.edges:
        for role, node_id in (("source", edge.source), ("target", edge.target)):
            if node_id not in defined:
                result.add_error(
                    code="UNDEFINED_NODE_REF",
                    message=f"Edge references undefined {role} node '{node_id}'",
                    edge=edge.id,
                    referenced_node=node_id,
                    role=role,
                )

    return result
