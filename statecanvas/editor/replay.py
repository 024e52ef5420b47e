"""Feed recorded input events through an editor session."""

from typing import Iterable

from ..geometry.types import Point
from ..schema.models import InputEvent
from .session import EditorSession


def apply_event(session: EditorSession, event: InputEvent) -> None:
    """Dispatch one recorded event to the matching session handler."""
    point = Point(event.x, event.y)

    if event.type == "down":
        session.pointer_down(point, modifier=event.modifier)
    elif event.type == "up":
        session.pointer_up(point)
    elif event.type == "move":
        session.pointer_move(point)
    elif event.type == "click":
        session.click(point)
    elif event.type == "double_click":
        session.double_click(point)
    elif event.type == "context_click":
        session.context_click(point)
    elif event.type == "key":
        session.key_down(event.key)
    elif event.type == "text":
        session.set_draft_label(event.text)
    elif event.type == "blur":
        session.commit_label()


def apply_events(session: EditorSession, events: Iterable[InputEvent]) -> EditorSession:
    """Apply events in order and return the session."""
    for event in events:
        apply_event(session, event)
    return session
