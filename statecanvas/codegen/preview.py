"""Live export view that regenerates TikZ code as parameters change."""

from typing import Any

from ..graph.diagram_graph import DiagramGraph
from ..schema.models import ExportParams
from ..utils.logging import get_logger
from .tikz import generate_tikz

logger = get_logger(__name__)


class ExportPreview:
    """Generated code for a graph, kept current while the view is open."""

    def __init__(self, graph: DiagramGraph, params: ExportParams | None = None):
        self.graph = graph
        self.params = params or ExportParams()
        self.text = ""
        self.is_open = False

    def open(self) -> str:
        """Open the view and generate code for the current graph."""
        self.is_open = True
        return self.refresh()

    def update(self, **changes: Any) -> str:
        """Change layout parameters, regenerating if the view is open.

        Keys may use either field names or their aliases (``maxWidth``...).

        Raises:
            pydantic.ValidationError: If a parameter value is invalid.
        """
        names = {
            field.alias: name
            for name, field in ExportParams.model_fields.items()
            if field.alias
        }
        data = self.params.model_dump()
        data.update({names.get(key, key): value for key, value in changes.items()})
        self.params = ExportParams.model_validate(data)
        if self.is_open:
            return self.refresh()
        return self.text

    def refresh(self) -> str:
        """Regenerate from the graph as it is now."""
        if not self.is_open:
            return self.text
        self.text = generate_tikz(self.graph.nodes, self.graph.edges, self.params)
        logger.debug("export_generated", nodes=len(self.graph), chars=len(self.text))
        return self.text

    def close(self) -> None:
        """Dismiss the view and drop the generated text."""
        self.is_open = False
        self.text = ""
