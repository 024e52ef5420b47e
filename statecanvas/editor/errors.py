"""Editor exceptions."""


class EditorContextError(Exception):
    """Raised when an editor session is created without a diagram graph."""

    def __init__(self, message: str = "EditorSession requires a DiagramGraph"):
        super().__init__(message)
