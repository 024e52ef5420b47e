"""Issue and result types shared by the snapshot validators."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class Severity(str, Enum):
    """How serious a finding is. Only errors fail a check."""

    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


@dataclass
class ValidationIssue:
    """One finding, attached to a node or an edge when it has one."""

    code: str
    message: str
    severity: Severity
    node: str | None = None
    edge: str | None = None
    details: dict[str, Any] = field(default_factory=dict)


@dataclass
class ValidationResult:
    """Findings of one or more validators, in the order they were reported."""

    issues: list[ValidationIssue] = field(default_factory=list)

    def by_severity(self, severity: Severity) -> list[ValidationIssue]:
        return [issue for issue in self.issues if issue.severity == severity]

    @property
    def errors(self) -> list[ValidationIssue]:
        return self.by_severity(Severity.ERROR)

    @property
    def warnings(self) -> list[ValidationIssue]:
        return self.by_severity(Severity.WARNING)

    @property
    def infos(self) -> list[ValidationIssue]:
        return self.by_severity(Severity.INFO)

    @property
    def has_errors(self) -> bool:
        return any(issue.severity == Severity.ERROR for issue in self.issues)

    @property
    def has_warnings(self) -> bool:
        return any(issue.severity == Severity.WARNING for issue in self.issues)

    @property
    def is_valid(self) -> bool:
        """A snapshot is valid when nothing was reported at error level."""
        return not self.has_errors

    def add(
        self,
        severity: Severity,
        code: str,
        message: str,
        node: str | None = None,
        edge: str | None = None,
        **details: Any,
    ) -> None:
        """Record a finding; extra keyword arguments land in ``details``."""
        self.issues.append(
            ValidationIssue(code, message, severity, node=node, edge=edge, details=details)
        )

    def add_error(self, code: str, message: str, **kwargs: Any) -> None:
        self.add(Severity.ERROR, code, message, **kwargs)

    def add_warning(self, code: str, message: str, **kwargs: Any) -> None:
        self.add(Severity.WARNING, code, message, **kwargs)

    def add_info(self, code: str, message: str, **kwargs: Any) -> None:
        self.add(Severity.INFO, code, message, **kwargs)

    def merge(self, other: "ValidationResult") -> None:
        self.issues.extend(other.issues)
