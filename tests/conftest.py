"""Shared fixtures for tests."""

from pathlib import Path

import pytest

from statecanvas.editor.session import EditorSession
from statecanvas.graph.diagram_graph import DiagramGraph
from statecanvas.schema.loader import parse_snapshot_from_string


@pytest.fixture
def examples_dir() -> Path:
    """Return the path to the examples directory."""
    return Path(__file__).parent.parent / "examples"


@pytest.fixture
def triangle_yaml() -> str:
    """Three states with a loop, a back edge and an edge heading down."""
    return """
nodes:
  - {id: n_0, x: 100, y: 100, label: q_0}
  - {id: n_1, x: 300, y: 100, label: q_1, accept: true}
  - {id: n_2, x: 200, y: 250, label: ""}
edges:
  - {id: e_0, from: n_0, to: n_1, label: a}
  - {id: e_1, from: n_1, to: n_1, label: b}
  - {id: e_2, from: n_1, to: n_2, label: c}
  - {id: e_3, from: n_0, to: n_2, label: d}
"""


@pytest.fixture
def triangle_snapshot(triangle_yaml):
    return parse_snapshot_from_string(triangle_yaml)


@pytest.fixture
def triangle_graph(triangle_snapshot):
    return DiagramGraph.from_snapshot(triangle_snapshot)


@pytest.fixture
def empty_session():
    return EditorSession(DiagramGraph())


@pytest.fixture
def triangle_session(triangle_graph):
    return EditorSession(triangle_graph)
