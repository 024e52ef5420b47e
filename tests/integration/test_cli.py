"""Integration tests for CLI."""

import json

import pytest
import yaml
from click.testing import CliRunner

from statecanvas.cli import main


@pytest.fixture
def runner():
    return CliRunner()


class TestExportCommand:
    def test_export_to_stdout(self, runner, examples_dir):
        result = runner.invoke(main, ["export", str(examples_dir / "two_states.yaml")])

        assert result.exit_code == 0
        assert r"\node[state,initial] (n_0) at (0.00,0.00) {$q_0$};" in result.output
        assert r"\node[state,accepting] (n_1) at (12.00,0.00) {$q_1$};" in result.output
        assert r"(n_0) edge node {a} (n_1);" in result.output

    def test_export_to_file(self, runner, examples_dir, tmp_path):
        output = tmp_path / "diagram.tex"
        result = runner.invoke(
            main,
            ["export", str(examples_dir / "even_ones.json"), "--output", str(output)],
        )

        assert result.exit_code == 0
        assert "Generated:" in result.output
        code = output.read_text()
        assert code.endswith("\\end{tikzpicture}\n")
        assert r"(n_1) edge [loop above] node {0} ()" in code

    def test_export_with_config_and_overrides(self, runner, examples_dir, tmp_path):
        config = tmp_path / "export.yaml"
        config.write_text("maxWidth: 6\nnodeSpacing: 3\n")

        result = runner.invoke(
            main,
            [
                "export",
                str(examples_dir / "two_states.yaml"),
                "--config",
                str(config),
                "--no-initial",
            ],
        )

        assert result.exit_code == 0
        assert "node distance=3cm" in result.output
        assert r"\node[state] (n_0)" in result.output
        assert "(n_1) at (6.00,0.00)" in result.output

    def test_invalid_parameter(self, runner, examples_dir):
        result = runner.invoke(
            main, ["export", str(examples_dir / "two_states.yaml"), "--max-width", "0"]
        )

        assert result.exit_code == 2
        assert "Invalid export parameters" in result.output

    def test_empty_snapshot(self, runner, tmp_path):
        snapshot = tmp_path / "empty.yaml"
        snapshot.write_text("")
        result = runner.invoke(main, ["export", str(snapshot)])

        assert result.exit_code == 0
        assert "% No nodes to export" in result.output

    def test_schema_error(self, runner, examples_dir):
        result = runner.invoke(
            main, ["export", str(examples_dir / "invalid" / "bad_schema.yaml")]
        )

        assert result.exit_code == 2
        assert "Schema validation error" in result.output


class TestCheckCommand:
    def test_check_valid_file(self, runner, examples_dir):
        result = runner.invoke(main, ["check", str(examples_dir / "two_states.yaml")])

        assert result.exit_code == 0
        assert "Check passed" in result.output

    def test_check_with_errors(self, runner, examples_dir):
        result = runner.invoke(
            main, ["check", str(examples_dir / "invalid" / "dangling_edge.yaml")]
        )

        assert result.exit_code == 1
        assert "UNDEFINED_NODE_REF" in result.output

    def test_check_with_warnings(self, runner, examples_dir):
        path = str(examples_dir / "invalid" / "isolated_node.yaml")

        assert runner.invoke(main, ["check", path]).exit_code == 0
        assert runner.invoke(main, ["check", path, "--strict"]).exit_code == 1

    def test_check_json_output(self, runner, examples_dir):
        result = runner.invoke(
            main, ["check", str(examples_dir / "even_ones.json"), "--format", "json"]
        )

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["valid"] is True

    def test_check_schema_error(self, runner, examples_dir):
        result = runner.invoke(
            main, ["check", str(examples_dir / "invalid" / "bad_schema.yaml")]
        )

        assert result.exit_code == 2

    def test_missing_file(self, runner):
        result = runner.invoke(main, ["check", "nonexistent.yaml"])
        assert result.exit_code != 0


class TestReplayCommand:
    def test_replay_from_empty(self, runner, examples_dir):
        result = runner.invoke(
            main, ["replay", "-", str(examples_dir / "build_session.yaml")]
        )

        assert result.exit_code == 0
        data = yaml.safe_load(result.output)
        assert [n["label"] for n in data["nodes"]] == ["q_0", "q_1"]
        assert [(e["from"], e["to"], e["label"]) for e in data["edges"]] == [
            ("n_0", "n_1", "a"),
            ("n_1", "n_1", "b"),
        ]
        assert (data["nextNodeId"], data["nextEdgeId"]) == (2, 2)

    def test_replay_on_snapshot(self, runner, examples_dir, tmp_path):
        events = tmp_path / "events.yaml"
        events.write_text(
            "- {type: click, at: [50, 0]}\n"
            "- {type: key, key: Delete}\n"
        )
        result = runner.invoke(
            main, ["replay", str(examples_dir / "two_states.yaml"), str(events)]
        )

        assert result.exit_code == 0
        data = yaml.safe_load(result.output)
        assert data["edges"] == []
        assert len(data["nodes"]) == 2

    def test_replay_bad_events(self, runner, tmp_path):
        events = tmp_path / "events.yaml"
        events.write_text("- {type: key}\n")
        result = runner.invoke(main, ["replay", "-", str(events)])

        assert result.exit_code == 2
