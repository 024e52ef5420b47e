"""EditorSession: turns pointer and keyboard input into graph mutations."""

from ..geometry.hit_test import Hit, HitKind, hit_test
from ..geometry.paths import connect_preview, edge_geometry, loop_angle_towards
from ..geometry.types import EdgeGeometry, LinePath, Point
from ..graph.diagram_graph import DiagramGraph
from ..schema.models import DiagramSnapshot, Edge, Node
from ..utils.logging import get_logger
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
    InteractionMode,
    NodeSelected,
    Selection,
)

logger = get_logger(__name__)

KEY_ENTER = "Enter"
KEY_ESCAPE = "Escape"
KEY_DELETE = "Delete"


class EditorSession:
    """Transient editing state layered over a DiagramGraph.

    Two groups of handlers are offered. The entity-targeted gestures
    (``press_node``, ``click_edge``, ...) are for hosts that already know what
    was clicked. The raw handlers (``pointer_down``, ``pointer_up``,
    ``click``, ``double_click``, ``context_click``, ``pointer_move``,
    ``key_down``) take surface-local coordinates, hit-test them and dispatch
    to the gestures.

    Every handler is a no-op when it does not apply: stale ids, unknown keys
    and gestures outside their mode leave the state unchanged.
    """

    def __init__(self, graph: DiagramGraph):
        """Start an idle session with nothing selected.

        Args:
            graph: The diagram being edited.

        Raises:
            EditorContextError: If ``graph`` is not a DiagramGraph.
        """
        if not isinstance(graph, DiagramGraph):
            raise EditorContextError()
        self.graph = graph
        self.mode: InteractionMode = IDLE
        self.selection: Selection = NO_SELECTION

    @classmethod
    def from_snapshot(cls, snapshot: DiagramSnapshot | None = None) -> "EditorSession":
        """Start a session on a persisted snapshot, or on an empty graph."""
        return cls(DiagramGraph.from_snapshot(snapshot))

    # -------------------------------------------------------------------------
    # Field-style views of the mode and selection
    # -------------------------------------------------------------------------

    @property
    def drag_target(self) -> str | None:
        return self.mode.node_id if isinstance(self.mode, Dragging) else None

    @property
    def connect_from(self) -> str | None:
        return self.mode.source_id if isinstance(self.mode, Connecting) else None

    @property
    def connect_preview_point(self) -> Point | None:
        return self.mode.preview if isinstance(self.mode, Connecting) else None

    @property
    def loop_drag_target(self) -> str | None:
        return self.mode.edge_id if isinstance(self.mode, DraggingLoop) else None

    @property
    def editing_node(self) -> str | None:
        return self.mode.node_id if isinstance(self.mode, EditingNode) else None

    @property
    def editing_edge(self) -> str | None:
        return self.mode.edge_id if isinstance(self.mode, EditingEdge) else None

    @property
    def draft_label(self) -> str:
        if isinstance(self.mode, (EditingNode, EditingEdge)):
            return self.mode.draft
        return ""

    @property
    def selected_node(self) -> str | None:
        return self.selection.node_id if isinstance(self.selection, NodeSelected) else None

    @property
    def selected_edge(self) -> str | None:
        return self.selection.edge_id if isinstance(self.selection, EdgeSelected) else None

    @property
    def is_editing(self) -> bool:
        return isinstance(self.mode, (EditingNode, EditingEdge))

    # -------------------------------------------------------------------------
    # Gestures
    # -------------------------------------------------------------------------

    def create_node(self, point: Point) -> Node:
        """Add a node at ``point`` and start editing its label."""
        self._finish_edit()
        x, y = point
        node = self.graph.add_node(x, y)
        self._set_mode(EditingNode(node.id, ""))
        return node

    def press_node(self, node_id: str, point: Point, modifier: bool = False) -> None:
        """Select a node and start dragging it, or connecting from it.

        While a connection is in progress a plain press only moves the
        selection, so the matching release completes the connection. A
        modifier press restarts the connection from this node.
        """
        if not self.graph.has_node(node_id):
            logger.debug("press_unknown_node", node_id=node_id)
            return

        self.selection = NodeSelected(node_id)
        if isinstance(self.mode, Connecting):
            if modifier:
                self._set_mode(Connecting(node_id, Point(*point)))
            return

        self._finish_edit()
        if modifier:
            self._set_mode(Connecting(node_id, Point(*point)))
        else:
            self._set_mode(Dragging(node_id))

    def pointer_move(self, point: Point) -> None:
        """Follow the pointer in the active drag, connect or loop-drag mode."""
        point = Point(*point)
        mode = self.mode

        if isinstance(mode, Dragging):
            if self.graph.update_node(mode.node_id, x=point.x, y=point.y) is None:
                self._set_mode(IDLE)

        elif isinstance(mode, Connecting):
            if self.graph.has_node(mode.source_id):
                self.mode = Connecting(mode.source_id, point)
            else:
                self._set_mode(IDLE)

        elif isinstance(mode, DraggingLoop):
            edge = self.graph.get_edge(mode.edge_id)
            node = self.graph.get_node(edge.source) if edge is not None else None
            if node is None:
                self._set_mode(IDLE)
                return
            self.graph.update_edge(edge.id, loop_angle=loop_angle_towards(node, point))

    def release(self) -> None:
        """End a node drag or loop-angle drag."""
        if isinstance(self.mode, (Dragging, DraggingLoop)):
            self._set_mode(IDLE)

    def release_on_node(self, node_id: str) -> Edge | None:
        """Complete a pending connection on ``node_id``.

        Releasing on the source node itself creates a self-loop. The new edge
        goes straight into label editing. Without a pending connection this
        is a plain release.

        Returns:
            The created edge, if any.
        """
        if not isinstance(self.mode, Connecting):
            self.release()
            return None

        edge = self.graph.add_edge(self.mode.source_id, node_id)
        if edge is None:
            self._set_mode(IDLE)
            return None

        self._set_mode(EditingEdge(edge.id, ""))
        return edge

    def click_surface(self) -> None:
        """Clear the selection and cancel a pending connection."""
        self.selection = NO_SELECTION
        if isinstance(self.mode, Connecting):
            logger.debug("connection_cancelled", source_id=self.mode.source_id)
            self._set_mode(IDLE)

    def click_edge(self, edge_id: str) -> None:
        """Select an edge."""
        if self.graph.has_edge(edge_id):
            self.selection = EdgeSelected(edge_id)

    def edit_node_label(self, node_id: str) -> None:
        """Start editing a node label, seeded with its current text."""
        node = self.graph.get_node(node_id)
        if node is None:
            return
        self._finish_edit()
        self._set_mode(EditingNode(node_id, node.label))

    def edit_edge_label(self, edge_id: str) -> None:
        """Start editing an edge label, seeded with its current text."""
        edge = self.graph.get_edge(edge_id)
        if edge is None:
            return
        self._finish_edit()
        self._set_mode(EditingEdge(edge_id, edge.label))

    def set_draft_label(self, text: str) -> None:
        """Replace the text typed so far in the active label edit."""
        if isinstance(self.mode, EditingNode):
            self.mode = EditingNode(self.mode.node_id, text)
        elif isinstance(self.mode, EditingEdge):
            self.mode = EditingEdge(self.mode.edge_id, text)

    def commit_label(self) -> None:
        """Write the draft into the label being edited and stop editing."""
        mode = self.mode
        if isinstance(mode, EditingNode):
            self.graph.update_node(mode.node_id, label=mode.draft)
        elif isinstance(mode, EditingEdge):
            self.graph.update_edge(mode.edge_id, label=mode.draft)
        else:
            return
        self._set_mode(IDLE)

    def toggle_accept(self, node_id: str) -> Node | None:
        """Flip a node between accepting and non-accepting."""
        node = self.graph.get_node(node_id)
        if node is None:
            return None
        return self.graph.update_node(node_id, accept=not node.accept)

    def press_loop(self, edge_id: str) -> None:
        """Start dragging the angle of a self-loop."""
        edge = self.graph.get_edge(edge_id)
        if edge is None or not edge.is_loop:
            return
        self._finish_edit()
        self._set_mode(DraggingLoop(edge_id))

    def delete_selection(self) -> None:
        """Remove the selected node (with its edges) or the selected edge."""
        selection = self.selection
        if isinstance(selection, NodeSelected):
            self.graph.remove_node(selection.node_id)
        elif isinstance(selection, EdgeSelected):
            self.graph.remove_edge(selection.edge_id)
        else:
            return
        self.selection = NO_SELECTION
        self._drop_stale_mode()

    def key_down(self, key: str) -> None:
        """Handle Enter (commit), Escape (cancel) and Delete."""
        if key == KEY_ENTER:
            self.commit_label()
        elif key == KEY_ESCAPE:
            if isinstance(self.mode, (Connecting, EditingNode, EditingEdge)):
                self._set_mode(IDLE)
        elif key == KEY_DELETE:
            self.delete_selection()
        else:
            logger.debug("key_ignored", key=key)

    # -------------------------------------------------------------------------
    # Raw pointer input
    # -------------------------------------------------------------------------

    def pointer_down(self, point: Point, modifier: bool = False) -> None:
        hit = self._hit(point)
        if hit is None:
            self._finish_edit()
        elif hit.kind == HitKind.NODE:
            self.press_node(hit.target_id, point, modifier)
        elif hit.is_loop:
            self.press_loop(hit.target_id)
        else:
            self._finish_edit()

    def pointer_up(self, point: Point) -> Edge | None:
        hit = self._hit(point)
        if hit is not None and hit.kind == HitKind.NODE:
            return self.release_on_node(hit.target_id)
        self.release()
        return None

    def click(self, point: Point) -> None:
        hit = self._hit(point)
        if hit is None:
            self.click_surface()
        elif hit.kind == HitKind.EDGE:
            self.click_edge(hit.target_id)

    def double_click(self, point: Point) -> Node | None:
        """Edit the label under the pointer, or create a node on empty surface."""
        hit = self._hit(point)
        if hit is None:
            return self.create_node(point)
        if hit.kind == HitKind.NODE:
            self.edit_node_label(hit.target_id)
        else:
            self.edit_edge_label(hit.target_id)
        return None

    def context_click(self, point: Point) -> None:
        hit = self._hit(point)
        if hit is not None and hit.kind == HitKind.NODE:
            self.toggle_accept(hit.target_id)

    # -------------------------------------------------------------------------
    # Render views
    # -------------------------------------------------------------------------

    def render_edges(self) -> list[tuple[Edge, EdgeGeometry]]:
        """Every drawable edge with its geometry, in drawing order."""
        lookup = self.graph.node_map()
        drawn = []
        for edge in self.graph.edges:
            geometry = edge_geometry(edge, lookup)
            if geometry is not None:
                drawn.append((edge, geometry))
        return drawn

    def preview_line(self) -> LinePath | None:
        """The rubber band of a pending connection."""
        if not isinstance(self.mode, Connecting):
            return None
        node = self.graph.get_node(self.mode.source_id)
        if node is None:
            return None
        return connect_preview(node, self.mode.preview)

    # -------------------------------------------------------------------------
    # Internals
    # -------------------------------------------------------------------------

    def _hit(self, point: Point) -> Hit | None:
        return hit_test(self.graph.nodes, self.graph.edges, Point(*point))

    def _set_mode(self, mode: InteractionMode) -> None:
        if mode != self.mode:
            logger.debug(
                "mode_changed",
                previous=type(self.mode).__name__,
                current=type(mode).__name__,
            )
        self.mode = mode

    def _finish_edit(self) -> None:
        # the host's text field loses focus when another gesture starts
        if self.is_editing:
            self.commit_label()

    def _drop_stale_mode(self) -> None:
        mode = self.mode
        if isinstance(mode, (Dragging, EditingNode)):
            alive = self.graph.has_node(mode.node_id)
        elif isinstance(mode, Connecting):
            alive = self.graph.has_node(mode.source_id)
        elif isinstance(mode, (DraggingLoop, EditingEdge)):
            alive = self.graph.has_edge(mode.edge_id)
        else:
            alive = True
        if not alive:
            self._set_mode(IDLE)
