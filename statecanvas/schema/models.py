"""Pydantic models for diagram nodes, edges and export parameters."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator


class Node(BaseModel):
    """A state of the automaton, drawn as a circle on the surface."""

    id: str
    x: float
    y: float
    label: str = ""
    accept: bool = False


class Edge(BaseModel):
    """A directed transition between two nodes (or a node and itself)."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    source: str = Field(alias="from")
    target: str = Field(alias="to")
    label: str = ""
    loop_angle: float | None = Field(default=None, alias="loopAngle")

    @property
    def is_loop(self) -> bool:
        """Whether the edge starts and ends on the same node."""
        return self.source == self.target


class DiagramSnapshot(BaseModel):
    """The graph as handed over by the persistence collaborator.

    ``next_node_id`` and ``next_edge_id`` are optional; when absent the id
    counters are recovered from the numeric suffixes of the loaded ids.
    """

    model_config = ConfigDict(populate_by_name=True)

    nodes: list[Node] = Field(default_factory=list)
    edges: list[Edge] = Field(default_factory=list)
    next_node_id: int | None = Field(default=None, ge=0, alias="nextNodeId")
    next_edge_id: int | None = Field(default=None, ge=0, alias="nextEdgeId")

    @model_validator(mode="before")
    @classmethod
    def normalize_snapshot(cls, data: dict) -> dict:
        """Treat explicit nulls for the collections as empty lists."""
        if isinstance(data, dict):
            for key in ("nodes", "edges"):
                if key in data and data[key] is None:
                    data[key] = []
        return data

    def to_data(self) -> dict:
        """Dump using the external field names (``from``, ``to``, ``loopAngle``)."""
        return self.model_dump(by_alias=True, exclude_none=True)


class ExportParams(BaseModel):
    """Layout parameters for the TikZ export."""

    model_config = ConfigDict(populate_by_name=True)

    mark_initial: bool = Field(default=True, alias="markInitial")
    max_width: float = Field(default=12, gt=0, alias="maxWidth")
    max_height: float = Field(default=8, gt=0, alias="maxHeight")
    node_distance: float = Field(default=2, ge=0, alias="nodeSpacing")
    shorten: float = Field(default=1, ge=0, alias="arrowShorten")


class InputEvent(BaseModel):
    """One recorded input event, in surface-local coordinates."""

    type: Literal[
        "down", "up", "move", "click", "double_click", "context_click", "key", "text", "blur"
    ]
    x: float = 0
    y: float = 0
    modifier: bool = False
    key: str | None = None
    text: str = ""

    @model_validator(mode="before")
    @classmethod
    def normalize_event(cls, data: dict) -> dict:
        """Accept ``at: [x, y]`` as shorthand for ``x``/``y``."""
        if isinstance(data, dict) and "at" in data:
            data = dict(data)
            at = data.pop("at")
            if isinstance(at, (list, tuple)) and len(at) == 2:
                data["x"], data["y"] = at
        return data

    @model_validator(mode="after")
    def check_key(self) -> "InputEvent":
        if self.type == "key" and not self.key:
            raise ValueError("key events need a 'key'")
        return self
