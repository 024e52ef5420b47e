"""Warnings about diagram structure that export fine but look suspicious."""

from collections import defaultdict

import networkx as nx

from ..schema.models import DiagramSnapshot
from .base import ValidationResult


def check_isolated_nodes(snapshot: DiagramSnapshot) -> ValidationResult:
    """Warn about nodes with no incoming or outgoing transitions."""
    result = ValidationResult()

    graph = nx.MultiDiGraph()
    graph.add_nodes_from(node.id for node in snapshot.nodes)
    graph.add_edges_from(
        (edge.source, edge.target)
        for edge in snapshot.edges
        if graph.has_node(edge.source) and graph.has_node(edge.target)
    )

    isolated = set(nx.isolates(graph))
    for node in snapshot.nodes:
        if node.id in isolated:
            result.add_warning(
                code="ISOLATED_NODE",
                message=f"Node '{node.id}' has no transitions",
                node=node.id,
            )

    return result


def check_loop_angles(snapshot: DiagramSnapshot) -> ValidationResult:
    """Warn about loop angles stored on edges that are not self-loops."""
    result = ValidationResult()

    for edge in snapshot.edges:
        if edge.loop_angle is not None and not edge.is_loop:
            result.add_warning(
                code="LOOP_ANGLE_ON_EDGE",
                message=f"Edge '{edge.id}' is not a self-loop but has a loop angle",
                edge=edge.id,
                loop_angle=edge.loop_angle,
            )

    return result


def check_parallel_edges(snapshot: DiagramSnapshot) -> ValidationResult:
    """Note parallel edges, whose labels are drawn at the same anchor."""
    result = ValidationResult()

    by_pair: dict[tuple[str, str], list[str]] = defaultdict(list)
    for edge in snapshot.edges:
        by_pair[(edge.source, edge.target)].append(edge.id)

    for (source, target), edge_ids in by_pair.items():
        if len(edge_ids) > 1:
            result.add_info(
                code="OVERLAPPING_LABELS",
                message=(
                    f"{len(edge_ids)} edges from '{source}' to '{target}' "
                    "share one label position"
                ),
                edge=edge_ids[0],
                edges=edge_ids,
            )

    return result
