"""Validators for loaded diagram snapshots."""

from .base import Severity, ValidationIssue, ValidationResult
from .reference_integrity import check_reference_integrity
from .runner import run_validators, validate_snapshot_file
from .structure import check_isolated_nodes, check_loop_angles, check_parallel_edges

__all__ = [
    "Severity",
    "ValidationIssue",
    "ValidationResult",
    "check_reference_integrity",
    "check_isolated_nodes",
    "check_loop_angles",
    "check_parallel_edges",
    "run_validators",
    "validate_snapshot_file",
]
