"""Dialogue core: option catalog, sessions, state machine, prompts and formatting."""

from .types import Child, Reply, Session, Step, StoryRequest
from .sessions import SessionStore
from .dialogue import DialogueStateMachine

__all__ = [
    "Child",
    "Reply",
    "Session",
    "Step",
    "StoryRequest",
    "SessionStore",
    "DialogueStateMachine",
]
