"""DiagramGraph: the node/edge model behind the editor, backed by networkx."""

from typing import Any, Iterable

import networkx as nx

from ..schema.models import DiagramSnapshot, Edge, Node
from ..utils.logging import get_logger
from .ids import IdCounter

logger = get_logger(__name__)

NODE_FIELDS = frozenset({"x", "y", "label", "accept"})
EDGE_FIELDS = frozenset({"label", "loop_angle"})


class DiagramGraph:
    """The automaton diagram as an ordered multigraph.

    Wraps a networkx MultiDiGraph keyed by edge id, so parallel edges and
    self-loops are stored as-is and removing a node drops its edges with it.
    Node order is insertion order; edge order is kept with a sequence number
    because networkx iterates edges by adjacency, not by insertion.

    The graph owns the id counters: only ``add_node`` and ``add_edge`` mint
    ids. Operations on unknown ids are no-ops.
    """

    def __init__(self):
        """Initialize an empty graph with both counters at zero."""
        self._graph = nx.MultiDiGraph()
        self._edge_index: dict[str, tuple[str, str]] = {}
        self._seq = 0
        self._node_ids = IdCounter("n")
        self._edge_ids = IdCounter("e")

    @classmethod
    def from_snapshot(cls, snapshot: DiagramSnapshot | None) -> "DiagramGraph":
        """Build a graph from a persisted snapshot; None starts empty."""
        graph = cls()
        if snapshot is None:
            return graph
        graph.set_nodes(snapshot.nodes)
        graph.set_edges(snapshot.edges)
        if snapshot.next_node_id is not None:
            graph._node_ids.advance_to(snapshot.next_node_id)
        if snapshot.next_edge_id is not None:
            graph._edge_ids.advance_to(snapshot.next_edge_id)
        return graph

    @property
    def graph(self) -> nx.MultiDiGraph:
        """Get the underlying networkx graph."""
        return self._graph

    # -------------------------------------------------------------------------
    # Collections
    # -------------------------------------------------------------------------

    @property
    def nodes(self) -> list[Node]:
        """All nodes in insertion order."""
        return [data["node"] for _, data in self._graph.nodes(data=True)]

    @property
    def edges(self) -> list[Edge]:
        """All edges in insertion order."""
        return [edge for _, edge in self._ordered_edges()]

    def set_nodes(self, nodes: Iterable[Node]) -> None:
        """Replace the node collection.

        Edges whose endpoints are not among the new nodes are dropped.
        """
        edges = self.edges
        self._graph = nx.MultiDiGraph()
        self._edge_index = {}

        for node in nodes:
            if self._graph.has_node(node.id):
                logger.warning("duplicate_node_dropped", node_id=node.id)
                continue
            self._graph.add_node(node.id, node=node)

        self._node_ids.seed_from(self._graph.nodes)
        self._insert_edges(edges)

    def set_edges(self, edges: Iterable[Edge]) -> None:
        """Replace the edge collection.

        Edges referencing unknown nodes, or repeating an id, are dropped.
        """
        for source, target, key in list(self._graph.edges(keys=True)):
            self._graph.remove_edge(source, target, key=key)
        self._edge_index = {}
        self._insert_edges(edges)

    def snapshot(self) -> DiagramSnapshot:
        """Return the current graph with the counters' next values."""
        return DiagramSnapshot(
            nodes=self.nodes,
            edges=self.edges,
            next_node_id=self._node_ids.next_value,
            next_edge_id=self._edge_ids.next_value,
        )

    # -------------------------------------------------------------------------
    # Node mutators
    # -------------------------------------------------------------------------

    def add_node(
        self, x: float, y: float, label: str = "", accept: bool = False
    ) -> Node:
        """Append a node with a freshly minted id."""
        node = Node(id=self._node_ids.mint(), x=x, y=y, label=label, accept=accept)
        self._graph.add_node(node.id, node=node)
        logger.debug("node_added", node_id=node.id, x=x, y=y)
        return node

    def update_node(self, node_id: str, **fields: Any) -> Node | None:
        """Overwrite fields of a node.

        Args:
            node_id: The node to update.
            **fields: Any of ``x``, ``y``, ``label``, ``accept``.

        Returns:
            The updated node, or None if the node does not exist.

        Raises:
            ValueError: If a field name is not updatable.
        """
        _check_fields(fields, NODE_FIELDS)
        if not self._graph.has_node(node_id):
            logger.debug("update_unknown_node", node_id=node_id)
            return None

        node = self._graph.nodes[node_id]["node"].model_copy(update=fields)
        self._graph.nodes[node_id]["node"] = node
        return node

    def remove_node(self, node_id: str) -> bool:
        """Remove a node together with every edge that touches it."""
        if not self._graph.has_node(node_id):
            return False

        dropped = [edge.id for edge in self.edges_touching(node_id)]
        for edge_id in dropped:
            del self._edge_index[edge_id]
        self._graph.remove_node(node_id)

        logger.debug("node_removed", node_id=node_id, cascaded_edges=dropped)
        return True

    # -------------------------------------------------------------------------
    # Edge mutators
    # -------------------------------------------------------------------------

    def add_edge(self, source: str, target: str, label: str = "") -> Edge | None:
        """Append an edge between two existing nodes.

        Returns:
            The new edge, or None if either endpoint does not exist.
        """
        if not (self._graph.has_node(source) and self._graph.has_node(target)):
            logger.debug("add_edge_unknown_endpoint", source=source, target=target)
            return None

        edge = Edge(id=self._edge_ids.mint(), source=source, target=target, label=label)
        self._insert_edge(edge)
        logger.debug("edge_added", edge_id=edge.id, source=source, target=target)
        return edge

    def update_edge(self, edge_id: str, **fields: Any) -> Edge | None:
        """Overwrite fields of an edge.

        ``loop_angle`` is only stored on self-loops and ignored otherwise.

        Returns:
            The updated edge, or None if the edge does not exist.

        Raises:
            ValueError: If a field name is not updatable.
        """
        _check_fields(fields, EDGE_FIELDS)
        data = self._edge_data(edge_id)
        if data is None:
            logger.debug("update_unknown_edge", edge_id=edge_id)
            return None

        edge: Edge = data["edge"]
        if "loop_angle" in fields and not edge.is_loop:
            fields = {k: v for k, v in fields.items() if k != "loop_angle"}

        edge = edge.model_copy(update=fields)
        data["edge"] = edge
        return edge

    def remove_edge(self, edge_id: str) -> bool:
        """Remove a single edge."""
        endpoints = self._edge_index.pop(edge_id, None)
        if endpoints is None:
            return False
        self._graph.remove_edge(*endpoints, key=edge_id)
        logger.debug("edge_removed", edge_id=edge_id)
        return True

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def has_node(self, node_id: str) -> bool:
        return self._graph.has_node(node_id)

    def has_edge(self, edge_id: str) -> bool:
        return edge_id in self._edge_index

    def get_node(self, node_id: str) -> Node | None:
        """Get a node by id."""
        if self._graph.has_node(node_id):
            return self._graph.nodes[node_id]["node"]
        return None

    def get_edge(self, edge_id: str) -> Edge | None:
        """Get an edge by id."""
        data = self._edge_data(edge_id)
        return data["edge"] if data is not None else None

    def node_map(self) -> dict[str, Node]:
        """Nodes keyed by id, in insertion order."""
        return {node_id: data["node"] for node_id, data in self._graph.nodes(data=True)}

    def edges_from(self, node_id: str) -> list[Edge]:
        """Outgoing edges of a node (self-loops included), in insertion order."""
        return [edge for edge in self.edges if edge.source == node_id]

    def edges_touching(self, node_id: str) -> list[Edge]:
        """Edges that start or end at a node, in insertion order."""
        if not self._graph.has_node(node_id):
            return []
        keys = {key for _, _, key in self._graph.out_edges(node_id, keys=True)}
        keys.update(key for _, _, key in self._graph.in_edges(node_id, keys=True))
        return [edge for edge in self.edges if edge.id in keys]

    def __len__(self) -> int:
        return self._graph.number_of_nodes()

    # -------------------------------------------------------------------------
    # Internals
    # -------------------------------------------------------------------------

    def _ordered_edges(self) -> list[tuple[int, Edge]]:
        entries = [
            (data["seq"], data["edge"])
            for _, _, data in self._graph.edges(data=True)
        ]
        entries.sort(key=lambda entry: entry[0])
        return entries

    def _edge_data(self, edge_id: str) -> dict[str, Any] | None:
        endpoints = self._edge_index.get(edge_id)
        if endpoints is None:
            return None
        return self._graph.edges[endpoints[0], endpoints[1], edge_id]

    def _insert_edge(self, edge: Edge) -> None:
        self._graph.add_edge(edge.source, edge.target, key=edge.id, edge=edge, seq=self._seq)
        self._edge_index[edge.id] = (edge.source, edge.target)
        self._seq += 1

    def _insert_edges(self, edges: Iterable[Edge]) -> None:
        for edge in edges:
            if edge.id in self._edge_index:
                logger.warning("duplicate_edge_dropped", edge_id=edge.id)
                continue
            if not (self._graph.has_node(edge.source) and self._graph.has_node(edge.target)):
                logger.warning(
                    "dangling_edge_dropped",
                    edge_id=edge.id,
                    source=edge.source,
                    target=edge.target,
                )
                continue
            self._insert_edge(edge)
        self._edge_ids.seed_from(self._edge_index)


def _check_fields(fields: dict[str, Any], allowed: frozenset[str]) -> None:
    unknown = set(fields) - allowed
    if unknown:
        raise ValueError(f"Cannot update field(s): {', '.join(sorted(unknown))}")
