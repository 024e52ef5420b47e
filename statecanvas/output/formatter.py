"""Output formatting for check reports and snapshots."""

import json
from dataclasses import asdict
from typing import Literal

import yaml

from ..schema.models import DiagramSnapshot
from ..validators.base import Severity, ValidationIssue, ValidationResult

_SYMBOLS = {
    Severity.ERROR: "✘",
    Severity.WARNING: "⚠",
    Severity.INFO: "ℹ",
}


def format_validation_result(
    result: ValidationResult,
    format: Literal["text", "json"] = "text",
) -> str:
    """Render a check report.

    Args:
        result: Issues collected by the validators.
        format: "text" for the terminal, "json" for tooling.

    Returns:
        The report as a single string.
    """
    if format == "json":
        return _format_json(result)
    return _format_text(result)


def format_snapshot(snapshot: DiagramSnapshot) -> str:
    """Dump a snapshot as YAML using the external field names."""
    return yaml.safe_dump(snapshot.to_data(), sort_keys=False, allow_unicode=True)


def _format_text(result: ValidationResult) -> str:
    sections = [
        ("ERRORS", result.errors),
        ("WARNINGS", result.warnings),
    ]
    # notes only appear when there are any
    if result.infos:
        sections.append(("NOTES", result.infos))

    lines: list[str] = []
    for title, issues in sections:
        lines.append(f"{title}:")
        lines.extend(f"  {_issue_line(issue)}" for issue in issues)
        if not issues:
            lines.append("  (none)")
        lines.append("")

    lines.append(_summary(result))
    return "\n".join(lines)


def _summary(result: ValidationResult) -> str:
    n_errors = len(result.errors)
    n_warnings = len(result.warnings)
    if not result.is_valid:
        return f"Check failed: {n_errors} error(s), {n_warnings} warning(s)"
    if n_warnings:
        return f"Check passed with {n_warnings} warning(s)"
    return "Check passed"


def _issue_line(issue: ValidationIssue) -> str:
    target = issue.node or issue.edge
    location = f"[{target}] " if target else ""
    return f"{_SYMBOLS[issue.severity]} {issue.code}: {location}{issue.message}"


def _format_json(result: ValidationResult) -> str:
    issues = []
    for issue in result.issues:
        entry = asdict(issue)
        entry["severity"] = issue.severity.value
        issues.append(entry)

    return json.dumps(
        {
            "valid": result.is_valid,
            "error_count": len(result.errors),
            "warning_count": len(result.warnings),
            "issues": issues,
        },
        indent=2,
    )
