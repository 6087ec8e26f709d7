"""
Option catalog for the story dialogue.

Every choice a user can pick from a keyboard is defined here. Dialogue steps
validate input against these lists.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class LengthOption:
    """A story length as shown on the keyboard and as sent to the generator."""

    label: str
    value: str


CATEGORIES = [
    "Fairy Tales",
    "Animals",
    "Fantasy",
    "Science Fiction",
    "Mystery",
    "Adventure",
    "Sports",
    "School",
]

TOPICS = [
    "Friendship",
    "Family",
    "Magic",
    "Space",
    "Nature",
    "History",
    "Heroes",
    "Holidays",
    "Travel",
]

LENGTHS = [
    LengthOption(label="Short (250 words)", value="short"),
    LengthOption(label="Medium (600 words)", value="medium"),
    LengthOption(label="Long (1000 words)", value="long"),
]

SENTENCES_PER_PARAGRAPH = ["1", "2", "3", "4", "5"]

SENTENCE_LENGTHS = ["Short", "Medium", "Long"]

MIN_CHILDREN = 1
MAX_CHILDREN = 10


def find_length(label: str) -> Optional[LengthOption]:
    """Look up a length option by its exact keyboard label."""
    for option in LENGTHS:
        if option.label == label:
            return option
    return None


def sentence_count_labels() -> list[str]:
    """Keyboard labels for the sentences-per-paragraph step."""
    return [f"{count} sentence(s)" for count in SENTENCES_PER_PARAGRAPH]
