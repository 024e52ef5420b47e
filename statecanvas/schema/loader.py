"""YAML/JSON loading for diagram snapshots and export parameters."""

from pathlib import Path
from typing import TypeVar

import yaml
from pydantic import BaseModel, TypeAdapter, ValidationError

from .errors import SnapshotLoadError, SnapshotValidationError
from .models import DiagramSnapshot, ExportParams, InputEvent

ModelT = TypeVar("ModelT", bound=BaseModel)

_EVENTS = TypeAdapter(list[InputEvent])


def load_data(path: str | Path) -> dict:
    """Load a YAML (or JSON) file and return the raw mapping.

    Args:
        path: Path to the file.

    Returns:
        The parsed data as a dictionary.

    Raises:
        SnapshotLoadError: If the file cannot be read or parsed.
    """
    path = Path(path)

    if not path.exists():
        raise SnapshotLoadError(f"File not found: {path}", str(path))

    if not path.is_file():
        raise SnapshotLoadError(f"Not a file: {path}", str(path))

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise SnapshotLoadError(f"Invalid YAML: {e}", str(path)) from e
    except OSError as e:
        raise SnapshotLoadError(f"Cannot read file: {e}", str(path)) from e

    if data is None:
        return {}

    if not isinstance(data, dict):
        raise SnapshotLoadError(
            f"Expected mapping at root, got {type(data).__name__}", str(path)
        )

    return data


def load_snapshot(path: str | Path) -> DiagramSnapshot:
    """Load and validate a diagram snapshot file.

    Raises:
        SnapshotLoadError: If the file cannot be read or parsed.
        SnapshotValidationError: If the data fails validation.
    """
    return _validate(DiagramSnapshot, load_data(path))


def parse_snapshot_from_string(text: str) -> DiagramSnapshot:
    """Parse a YAML or JSON string into a DiagramSnapshot.

    An empty string yields an empty snapshot.

    Raises:
        SnapshotLoadError: If the text cannot be parsed.
        SnapshotValidationError: If the data fails validation.
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise SnapshotLoadError(f"Invalid YAML: {e}") from e

    if data is None:
        data = {}

    if not isinstance(data, dict):
        raise SnapshotLoadError(f"Expected mapping at root, got {type(data).__name__}")

    return _validate(DiagramSnapshot, data)


def load_export_params(path: str | Path) -> ExportParams:
    """Load export parameters from a YAML file."""
    return _validate(ExportParams, load_data(path))


def _validate(model: type[ModelT], data: dict) -> ModelT:
    """Validate raw data against a model, flattening pydantic errors.

    Raises:
        SnapshotValidationError: If the data fails validation.
    """
    try:
        return model.model_validate(data)
    except ValidationError as e:
        errors = _flatten_errors(e)
        raise SnapshotValidationError(
            f"Schema validation failed with {len(errors)} error(s)", errors
        ) from e


def _flatten_errors(e: ValidationError) -> list[dict]:
    return [
        {
            "loc": ".".join(str(x) for x in err["loc"]),
            "msg": err["msg"],
            "type": err["type"],
        }
        for err in e.errors()
    ]


def load_events(path: str | Path) -> list[InputEvent]:
    """Load a YAML list of recorded input events.

    Raises:
        SnapshotLoadError: If the file cannot be read or is not a list.
        SnapshotValidationError: If an event fails validation.
    """
    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise SnapshotLoadError(f"Invalid YAML: {e}", str(path)) from e
    except OSError as e:
        raise SnapshotLoadError(f"Cannot read file: {e}", str(path)) from e

    if data is None:
        return []

    if not isinstance(data, list):
        raise SnapshotLoadError(
            f"Expected a list of events, got {type(data).__name__}", str(path)
        )

    try:
        return _EVENTS.validate_python(data)
    except ValidationError as e:
        raise SnapshotValidationError(
            f"Event validation failed with {e.error_count()} error(s)",
            _flatten_errors(e),
        ) from e
