"""Tests for output formatting."""

import json

import yaml

from statecanvas.output.formatter import format_snapshot, format_validation_result
from statecanvas.validators.base import ValidationResult


def _result() -> ValidationResult:
    result = ValidationResult()
    result.add_error("UNDEFINED_NODE_REF", "Edge references undefined target node 'n_9'", edge="e_1")
    result.add_warning("ISOLATED_NODE", "Node 'n_2' has no transitions", node="n_2")
    result.add_info("OVERLAPPING_LABELS", "2 edges share one label position", edge="e_0")
    return result


class TestTextFormat:
    def test_passed(self):
        text = format_validation_result(ValidationResult())

        assert "ERRORS:\n  (none)" in text
        assert "NOTES:" not in text
        assert text.endswith("Check passed")

    def test_failed(self):
        text = format_validation_result(_result())

        assert "UNDEFINED_NODE_REF: [e_1]" in text
        assert "ISOLATED_NODE: [n_2]" in text
        assert "NOTES:" in text
        assert text.endswith("Check failed: 1 error(s), 1 warning(s)")

    def test_passed_with_warnings(self):
        result = ValidationResult()
        result.add_warning("ISOLATED_NODE", "Node 'n_2' has no transitions", node="n_2")

        assert format_validation_result(result).endswith("Check passed with 1 warning(s)")


def test_json_format():
    data = json.loads(format_validation_result(_result(), "json"))

    assert data["valid"] is False
    assert (data["error_count"], data["warning_count"]) == (1, 1)
    assert [i["severity"] for i in data["issues"]] == ["error", "warning", "info"]
    assert data["issues"][1]["node"] == "n_2"


def test_snapshot_uses_external_names(triangle_graph):
    triangle_graph.update_edge("e_1", loop_angle=45)
    data = yaml.safe_load(format_snapshot(triangle_graph.snapshot()))

    assert list(data) == ["nodes", "edges", "nextNodeId", "nextEdgeId"]
    assert data["edges"][0] == {"id": "e_0", "from": "n_0", "to": "n_1", "label": "a"}
    assert data["edges"][1]["loopAngle"] == 45
    assert data["nextNodeId"] == 3
