"""Validation runner that orchestrates all validators."""

from pathlib import Path

from ..schema.loader import load_snapshot
from ..schema.models import DiagramSnapshot
from .base import ValidationResult
from .reference_integrity import check_reference_integrity
from .structure import check_isolated_nodes, check_loop_angles, check_parallel_edges


def run_validators(snapshot: DiagramSnapshot) -> ValidationResult:
    """Run all validators on a snapshot.

    Args:
        snapshot: The loaded diagram.

    Returns:
        Combined ValidationResult from all validators.
    """
    result = ValidationResult()

    # Run reference integrity first (most fundamental)
    result.merge(check_reference_integrity(snapshot))

    result.merge(check_loop_angles(snapshot))
    result.merge(check_isolated_nodes(snapshot))
    result.merge(check_parallel_edges(snapshot))

    return result


def validate_snapshot_file(path: str | Path) -> ValidationResult:
    """Load and validate a snapshot file.

    Raises:
        SnapshotLoadError: If the file cannot be loaded.
        SnapshotValidationError: If the data fails schema validation.
    """
    return run_validators(load_snapshot(path))
