"""
Centralized domain types for the Children's Story Bot.

Dialogue state, the request being assembled, and the replies the dialogue
produces are defined here so the core stays independent of the chat transport.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


# =============================================================================
# Dialogue Steps
# =============================================================================


class Step(str, Enum):
    """Dialogue steps, in the order they are visited."""

    CATEGORY = "CATEGORY"
    TOPIC = "TOPIC"
    LENGTH = "LENGTH"
    SENTENCES_PER_MSG = "SENTENCES_PER_MSG"
    SENTENCE_LENGTH = "SENTENCE_LENGTH"
    NUM_CHILDREN = "NUM_CHILDREN"
    CHILD_DETAILS = "CHILD_DETAILS"


STEP_ORDER: list[Step] = list(Step)


# =============================================================================
# Request Types
# =============================================================================


CHILD_FIELD_COUNT = 6


@dataclass
class Child:
    """One child to feature in the story."""

    name: str
    age: str
    gender: str
    hair_color: str
    eye_color: str
    skin_tone: str

    @classmethod
    def from_line(cls, text: str) -> Optional["Child"]:
        """Parse "Name, Age, Gender, Hair, Eyes, Skin".

        Returns None when fewer than six fields are given. Extra fields are ignored.
        """
        parts = [part.strip() for part in text.split(",")]
        if len(parts) < CHILD_FIELD_COUNT:
            return None
        return cls(*parts[:CHILD_FIELD_COUNT])

    def describe(self) -> str:
        """Human-readable description used in generation prompts."""
        return (
            f"{self.name} ({self.age} years old, {self.gender}, "
            f"Hair: {self.hair_color}, Eyes: {self.eye_color}, Skin: {self.skin_tone})"
        )


@dataclass
class StoryRequest:
    """Story parameters, filled in one dialogue step at a time."""

    category: Optional[str] = None
    topic: Optional[str] = None
    story_length: Optional[str] = None
    sentences_per_paragraph: Optional[str] = None
    sentence_length: Optional[str] = None
    expected_children: Optional[int] = None
    children: list[Child] = field(default_factory=list)

    @property
    def is_complete(self) -> bool:
        return (
            self.expected_children is not None
            and len(self.children) == self.expected_children
        )


@dataclass
class Session:
    """Per-user dialogue progress."""

    user_id: int
    step: Step = Step.CATEGORY
    data: StoryRequest = field(default_factory=StoryRequest)


# =============================================================================
# Reply Types
# =============================================================================


@dataclass
class Reply:
    """An outbound message produced by the dialogue.

    ``keyboard`` lists the options to offer as a one-time choice keyboard.
    ``remove_keyboard`` hides any keyboard left over from the previous step.
    """

    text: str
    keyboard: Optional[list[str]] = None
    remove_keyboard: bool = False
