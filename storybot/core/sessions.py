"""In-memory session store keyed by user id."""

import logging
from typing import Optional

from .types import Session

logger = logging.getLogger(__name__)


class SessionStore:
    """Owns every live dialogue session.

    Sessions live only in process memory. Abandoned sessions stay until the
    user restarts or the process exits. All access happens on the event loop
    thread, so there is no locking.
    """

    def __init__(self):
        self._sessions: dict[int, Session] = {}

    def create(self, user_id: int) -> Session:
        """Start a fresh session, replacing any existing one for this user."""
        if user_id in self._sessions:
            logger.info("Replacing existing session", extra={"user_id": user_id})
        session = Session(user_id=user_id)
        self._sessions[user_id] = session
        return session

    def get(self, user_id: int) -> Optional[Session]:
        return self._sessions.get(user_id)

    def delete(self, user_id: int) -> None:
        self._sessions.pop(user_id, None)

    def __contains__(self, user_id: int) -> bool:
        return user_id in self._sessions

    def __len__(self) -> int:
        return len(self._sessions)
