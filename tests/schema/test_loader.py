"""Tests for snapshot loading."""

import pytest

from statecanvas.schema.errors import SnapshotLoadError, SnapshotValidationError
from statecanvas.schema.loader import (
    load_data,
    load_events,
    load_export_params,
    load_snapshot,
    parse_snapshot_from_string,
)


class TestLoadData:
    def test_load_valid_yaml(self, tmp_path):
        path = tmp_path / "test.yaml"
        path.write_text("nodes: []\nedges: []")

        assert load_data(path) == {"nodes": [], "edges": []}

    def test_file_not_found(self):
        with pytest.raises(SnapshotLoadError) as exc_info:
            load_data("/nonexistent/path.yaml")
        assert "not found" in str(exc_info.value).lower()

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "invalid.yaml"
        path.write_text("nodes: [unclosed")

        with pytest.raises(SnapshotLoadError) as exc_info:
            load_data(path)
        assert "Invalid YAML" in str(exc_info.value)

    def test_empty_file_returns_empty_dict(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")

        assert load_data(path) == {}

    def test_non_mapping_at_root(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- a\n- b")

        with pytest.raises(SnapshotLoadError) as exc_info:
            load_data(path)
        assert "mapping" in str(exc_info.value).lower()


class TestParseSnapshotFromString:
    def test_empty_string(self):
        snapshot = parse_snapshot_from_string("")
        assert snapshot.nodes == []
        assert snapshot.edges == []

    def test_json_is_accepted(self):
        snapshot = parse_snapshot_from_string(
            '{"nodes": [{"id": "n_0", "x": 1, "y": 2}], "edges": []}'
        )
        assert snapshot.nodes[0].id == "n_0"

    def test_validation_errors_are_flattened(self):
        with pytest.raises(SnapshotValidationError) as exc_info:
            parse_snapshot_from_string("nodes:\n  - {id: n_0, x: left, y: 0}")

        errors = exc_info.value.errors
        assert len(errors) == 1
        assert errors[0]["loc"] == "nodes.0.x"

    def test_invalid_yaml_string(self):
        with pytest.raises(SnapshotLoadError):
            parse_snapshot_from_string("nodes: [broken")


class TestLoadFiles:
    def test_load_example_snapshot(self, examples_dir):
        snapshot = load_snapshot(examples_dir / "even_ones.json")

        assert [n.id for n in snapshot.nodes] == ["n_0", "n_1", "n_2"]
        assert snapshot.edges[2].loop_angle == 0
        assert snapshot.next_edge_id == 6

    def test_load_export_params(self, tmp_path):
        path = tmp_path / "params.yaml"
        path.write_text("maxWidth: 10\nmark_initial: false\n")

        params = load_export_params(path)
        assert params.max_width == 10
        assert params.mark_initial is False

    def test_load_events(self, examples_dir):
        events = load_events(examples_dir / "build_session.yaml")

        assert events[0].type == "double_click"
        assert events[2].key == "Enter"

    def test_events_must_be_a_list(self, tmp_path):
        path = tmp_path / "events.yaml"
        path.write_text("type: click")

        with pytest.raises(SnapshotLoadError):
            load_events(path)

    def test_invalid_event(self, tmp_path):
        path = tmp_path / "events.yaml"
        path.write_text("- {type: key}")

        with pytest.raises(SnapshotValidationError):
            load_events(path)
