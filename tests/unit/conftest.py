"""Pytest fixtures for dialogue and generation tests."""

import pytest

from storybot.core.dialogue import DialogueStateMachine
from storybot.core.sessions import SessionStore
from storybot.core.types import Child, StoryRequest

USER_ID = 4242

# Answers that walk a session from CATEGORY to CHILD_DETAILS
ANSWERS_UNTIL_CHILDREN = [
    "Fantasy",
    "Magic",
    "Medium (600 words)",
    "3 sentence(s)",
    "Short",
]


class DispatchRecorder:
    """Stands in for the generation dispatcher and records every request."""

    def __init__(self, store: SessionStore = None):
        self.requests = []
        self.store = store
        self.session_present_at_dispatch = []

    def __call__(self, request):
        self.requests.append(request)
        if self.store is not None:
            self.session_present_at_dispatch.append(USER_ID in self.store)


@pytest.fixture
def store():
    return SessionStore()


@pytest.fixture
def dialogue(store):
    return DialogueStateMachine(store)


@pytest.fixture
def dispatch(store):
    return DispatchRecorder(store)


@pytest.fixture
def at_num_children(dialogue, dispatch):
    """A dialogue for USER_ID advanced to the NUM_CHILDREN step."""
    dialogue.start(USER_ID)
    for answer in ANSWERS_UNTIL_CHILDREN:
        dialogue.handle(USER_ID, answer, dispatch)
    return dialogue


@pytest.fixture
def sample_request():
    return StoryRequest(
        category="Fantasy",
        topic="Magic",
        story_length="medium",
        sentences_per_paragraph="3",
        sentence_length="short",
        expected_children=2,
        children=[
            Child("Mia", "5", "female", "brown", "blue", "tan"),
            Child("Leo", "7", "male", "black", "green", "dark"),
        ],
    )
