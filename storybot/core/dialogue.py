"""
Linear dialogue that collects a StoryRequest one answer at a time.

Each step validates the user's text against the option catalog. A rejected
answer leaves the session untouched and re-prompts. An accepted answer is
stored, the session advances one step, and the next question is returned.
"""

import logging
import re
from typing import Callable

from . import catalog
from .sessions import SessionStore
from .types import CHILD_FIELD_COUNT, Child, Reply, Session, Step, StoryRequest

logger = logging.getLogger(__name__)

Dispatch = Callable[[StoryRequest], None]

WELCOME_TEXT = (
    "Welcome to the Story Generator! 📖\n"
    "Let's create a fun story. First, choose a category:"
)
NO_SESSION_TEXT = "Please type /start to begin a new story."
CHILD_FORMAT = "Name, Age, Gender, Hair Color, Eye Color, Skin Tone"

# Leading integer, the way a lenient number parser reads "3 kids" as 3
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def parse_child_count(text: str) -> int | None:
    """Return the number of children if text is an integer in range, else None."""
    match = _LEADING_INT.match(text)
    if not match:
        return None
    count = int(match.group(1))
    if count < catalog.MIN_CHILDREN or count > catalog.MAX_CHILDREN:
        return None
    return count


class DialogueStateMachine:
    """Drives sessions through the fixed sequence of story questions."""

    def __init__(self, store: SessionStore):
        self.store = store
        self._handlers = {
            Step.CATEGORY: self._handle_category,
            Step.TOPIC: self._handle_topic,
            Step.LENGTH: self._handle_length,
            Step.SENTENCES_PER_MSG: self._handle_sentences_per_msg,
            Step.SENTENCE_LENGTH: self._handle_sentence_length,
            Step.NUM_CHILDREN: self._handle_num_children,
            Step.CHILD_DETAILS: self._handle_child_details,
        }

    def start(self, user_id: int) -> list[Reply]:
        """Begin a new dialogue, discarding any previous one for this user."""
        self.store.create(user_id)
        logger.info("Session started", extra={"user_id": user_id})
        return [Reply(WELCOME_TEXT, keyboard=list(catalog.CATEGORIES))]

    def handle(self, user_id: int, text: str, dispatch: Dispatch) -> list[Reply]:
        """
        Apply one user message to that user's session.

        Args:
            user_id: Key of the session to advance
            text: Raw message text
            dispatch: Called once with the finished request when the last
                child has been entered. It must not block; generation runs
                outside the dialogue.

        Returns:
            Replies to send back, in order
        """
        session = self.store.get(user_id)
        if session is None:
            return [Reply(NO_SESSION_TEXT)]

        handler = self._handlers[session.step]
        return handler(session, text, dispatch)

    # -------------------------------------------------------------------------
    # Step handlers
    # -------------------------------------------------------------------------

    def _reject(self, session: Session, message: str) -> list[Reply]:
        logger.debug(
            "Rejected input", extra={"user_id": session.user_id, "step": session.step.value}
        )
        return [Reply(message)]

    def _handle_category(self, session: Session, text: str, dispatch: Dispatch) -> list[Reply]:
        if text not in catalog.CATEGORIES:
            return self._reject(session, "Please select a valid category from the keyboard.")
        session.data.category = text
        session.step = Step.TOPIC
        return [Reply("Great! Now select a topic:", keyboard=list(catalog.TOPICS))]

    def _handle_topic(self, session: Session, text: str, dispatch: Dispatch) -> list[Reply]:
        if text not in catalog.TOPICS:
            return self._reject(session, "Please select a valid topic.")
        session.data.topic = text
        session.step = Step.LENGTH
        return [
            Reply(
                "How long should the story be?",
                keyboard=[option.label for option in catalog.LENGTHS],
            )
        ]

    def _handle_length(self, session: Session, text: str, dispatch: Dispatch) -> list[Reply]:
        option = catalog.find_length(text)
        if option is None:
            return self._reject(session, "Please select a valid length.")
        session.data.story_length = option.value
        session.step = Step.SENTENCES_PER_MSG
        return [
            Reply(
                "How many sentences per paragraph?",
                keyboard=catalog.sentence_count_labels(),
            )
        ]

    def _handle_sentences_per_msg(
        self, session: Session, text: str, dispatch: Dispatch
    ) -> list[Reply]:
        count = text.split(" ")[0]
        if count not in catalog.SENTENCES_PER_PARAGRAPH:
            return self._reject(session, "Please select a valid number.")
        session.data.sentences_per_paragraph = count
        session.step = Step.SENTENCE_LENGTH
        return [
            Reply(
                "How long should the sentences be?",
                keyboard=list(catalog.SENTENCE_LENGTHS),
            )
        ]

    def _handle_sentence_length(
        self, session: Session, text: str, dispatch: Dispatch
    ) -> list[Reply]:
        if text not in catalog.SENTENCE_LENGTHS:
            return self._reject(session, "Please select a valid option.")
        session.data.sentence_length = text.lower()
        session.step = Step.NUM_CHILDREN
        return [
            Reply(
                "How many children are in the story? "
                f"(Enter a number between {catalog.MIN_CHILDREN} and {catalog.MAX_CHILDREN})",
                remove_keyboard=True,
            )
        ]

    def _handle_num_children(
        self, session: Session, text: str, dispatch: Dispatch
    ) -> list[Reply]:
        count = parse_child_count(text)
        if count is None:
            return self._reject(
                session,
                f"Please enter a valid number between {catalog.MIN_CHILDREN} and {catalog.MAX_CHILDREN}.",
            )
        session.data.expected_children = count
        session.data.children = []
        session.step = Step.CHILD_DETAILS
        return [
            Reply(
                "Please enter details for Child 1 in this format:\n"
                f"{CHILD_FORMAT}\n\n"
                "Example: Raia, 3, female, black, gray, brown"
            )
        ]

    def _handle_child_details(
        self, session: Session, text: str, dispatch: Dispatch
    ) -> list[Reply]:
        child = Child.from_line(text)
        if child is None:
            return self._reject(
                session,
                f"Please provide all {CHILD_FIELD_COUNT} details separated by commas:\n{CHILD_FORMAT}",
            )

        request = session.data
        request.children.append(child)

        if not request.is_complete:
            return [Reply(f"Saved! Now enter details for Child {len(request.children) + 1}:")]

        logger.info(
            "Story request complete, dispatching generation",
            extra={"user_id": session.user_id},
        )
        dispatch(request)
        self.store.delete(session.user_id)
        return []
