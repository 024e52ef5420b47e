"""Tests for schema models."""

import pytest
from pydantic import ValidationError

from statecanvas.schema.models import DiagramSnapshot, Edge, ExportParams, InputEvent, Node


class TestNode:
    def test_defaults(self):
        node = Node(id="n_0", x=10, y=20)
        assert node.label == ""
        assert node.accept is False

    def test_rejects_non_numeric_position(self):
        with pytest.raises(ValidationError):
            Node(id="n_0", x="left", y=0)


class TestEdge:
    def test_from_external_names(self):
        edge = Edge.model_validate({"id": "e_0", "from": "n_0", "to": "n_1", "loopAngle": 45})
        assert edge.source == "n_0"
        assert edge.target == "n_1"
        assert edge.loop_angle == 45

    def test_from_field_names(self):
        edge = Edge(id="e_0", source="n_0", target="n_0")
        assert edge.is_loop
        assert edge.loop_angle is None

    def test_not_a_loop(self):
        edge = Edge(id="e_0", source="n_0", target="n_1")
        assert not edge.is_loop


class TestDiagramSnapshot:
    def test_empty(self):
        snapshot = DiagramSnapshot()
        assert snapshot.nodes == []
        assert snapshot.edges == []
        assert snapshot.next_node_id is None

    def test_null_collections(self):
        snapshot = DiagramSnapshot.model_validate({"nodes": None, "edges": None})
        assert snapshot.nodes == []
        assert snapshot.edges == []

    def test_to_data_uses_external_names(self):
        snapshot = DiagramSnapshot(
            nodes=[Node(id="n_0", x=0, y=0)],
            edges=[Edge(id="e_0", source="n_0", target="n_0", loop_angle=10)],
            next_node_id=1,
        )
        data = snapshot.to_data()

        assert data["edges"][0]["from"] == "n_0"
        assert data["edges"][0]["loopAngle"] == 10
        assert data["nextNodeId"] == 1
        assert "nextEdgeId" not in data

    def test_negative_counter_rejected(self):
        with pytest.raises(ValidationError):
            DiagramSnapshot(next_node_id=-1)


class TestExportParams:
    def test_defaults(self):
        params = ExportParams()
        assert params.mark_initial is True
        assert params.max_width == 12
        assert params.max_height == 8
        assert params.node_distance == 2
        assert params.shorten == 1

    def test_aliases(self):
        params = ExportParams.model_validate(
            {"markInitial": False, "maxWidth": 6, "nodeSpacing": 3, "arrowShorten": 2}
        )
        assert params.mark_initial is False
        assert params.max_width == 6
        assert params.node_distance == 3
        assert params.shorten == 2

    def test_rejects_non_positive_size(self):
        with pytest.raises(ValidationError):
            ExportParams(max_width=0)


class TestInputEvent:
    def test_at_shorthand(self):
        event = InputEvent.model_validate({"type": "down", "at": [3, 4], "modifier": True})
        assert (event.x, event.y) == (3, 4)
        assert event.modifier is True

    def test_key_event_needs_key(self):
        with pytest.raises(ValidationError):
            InputEvent(type="key")

    def test_unknown_type(self):
        with pytest.raises(ValidationError):
            InputEvent(type="wheel")
