"""Generate TikZ ``automata`` code from a diagram."""

from decimal import ROUND_HALF_UP, Decimal
from typing import Sequence

from ..schema.models import Edge, ExportParams, Node

EMPTY_PLACEHOLDER = "% No nodes to export"

_PATH_INDENT = "     "
_EDGE_INDENT = "          "


def generate_tikz(
    nodes: Sequence[Node],
    edges: Sequence[Edge],
    params: ExportParams | None = None,
) -> str:
    """Render nodes and edges as a ``tikzpicture`` block.

    Node positions are rescaled so the drawing fits ``max_width`` by
    ``max_height`` with its aspect ratio kept, and the y axis is flipped
    (TikZ grows upward, the editing surface downward). Edges are grouped into
    one path clause per source node, in order of first appearance.

    Args:
        nodes: Nodes in drawing order; the first one is the initial state.
        edges: Edges in drawing order.
        params: Layout parameters; defaults when omitted.

    Returns:
        The TikZ code, or a comment-only placeholder when there are no nodes.
    """
    if params is None:
        params = ExportParams()

    if not nodes:
        return EMPTY_PLACEHOLDER

    min_x = min(n.x for n in nodes)
    max_x = max(n.x for n in nodes)
    min_y = min(n.y for n in nodes)
    max_y = max(n.y for n in nodes)

    width = max_x - min_x
    height = max_y - min_y
    scale_x = params.max_width / width if width > 0 else 1
    scale_y = params.max_height / height if height > 0 else 1
    scale = min(scale_x, scale_y)

    lines = [
        "\\begin{tikzpicture}"
        f"[shorten >={_number(params.shorten)}pt,"
        f"node distance={_number(params.node_distance)}cm,on grid,auto]"
    ]

    for index, node in enumerate(nodes):
        options = ["state"]
        if index == 0 and params.mark_initial:
            options.append("initial")
        if node.accept:
            options.append("accepting")

        x = _coordinate((node.x - min_x) * scale)
        y = _coordinate((min_y - node.y) * scale)
        content = f"{{${node.label}$}}" if node.label != "" else ""
        lines.append(
            f"   \\node[{','.join(options)}] ({node.id}) at ({x},{y}) {content};"
        )

    path_block = _path_block(nodes, edges)
    if path_block:
        lines.append(path_block)

    lines.append("\\end{tikzpicture}")
    return "\n".join(lines)


def _path_block(nodes: Sequence[Node], edges: Sequence[Edge]) -> str:
    """Build the ``\\path[->]`` statement, or "" if no edge can be drawn."""
    by_id = {node.id: node for node in nodes}
    groups = group_edges_by_source(edges)

    clauses = []
    for source_id, source_edges in groups.items():
        source = by_id.get(source_id)
        if source is None:
            continue

        parts = []
        for edge in source_edges:
            target = by_id.get(edge.target)
            if target is None:
                continue
            parts.append(_edge_clause(source, target, edge))

        if parts:
            clauses.append(f"({source.id})" + f"\n{_EDGE_INDENT}".join(parts))

    if not clauses:
        return ""

    body = f"\n{_PATH_INDENT}".join(clauses)
    return f"   \\path[->]\n{_PATH_INDENT}{body};"


def _edge_clause(source: Node, target: Node, edge: Edge) -> str:
    if edge.is_loop:
        return f" edge [loop above] node {{{edge.label}}} ()"

    # labels go on the other side when the arrow heads down the page
    swap = " [swap]" if should_swap_label(source, target) else ""
    return f" edge node{swap} {{{edge.label}}} ({target.id})"


def should_swap_label(source: Node, target: Node) -> bool:
    """Whether the target sits lower on the surface than the source."""
    return target.y > source.y


def group_edges_by_source(edges: Sequence[Edge]) -> dict[str, list[Edge]]:
    """Group edges by source id, keeping first-appearance and edge order."""
    groups: dict[str, list[Edge]] = {}
    for edge in edges:
        groups.setdefault(edge.source, []).append(edge)
    return groups


def _number(value: float) -> str:
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


def _coordinate(value: float) -> str:
    # ties round away from zero, on the exact binary value
    return str(Decimal(value).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))
