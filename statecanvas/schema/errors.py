"""Snapshot loading exceptions."""


class SnapshotLoadError(Exception):
    """Raised when a snapshot or params file cannot be loaded."""

    def __init__(self, message: str, path: str | None = None):
        self.path = path
        super().__init__(message)


class SnapshotValidationError(Exception):
    """Raised when loaded data fails schema validation."""

    def __init__(self, message: str, errors: list[dict] | None = None):
        self.errors = errors or []
        super().__init__(message)
