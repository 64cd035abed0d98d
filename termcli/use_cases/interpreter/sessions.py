"""
Registry of independent interpreter sessions, addressed by id.
"""

import logging
import threading
import uuid
from typing import Callable, Optional

from termcli.entities.session import Session
from termcli.exceptions import SessionNotFoundError


class SessionRegistry:
    """
    Keeps sessions created through the API so each one keeps its own current directory.

    Every session is paired with a lock; commands on one session must hold it so
    they never run at the same time.
    """

    def __init__(
        self,
        factory: Callable[[], Session],
        logger: Optional[logging.Logger] = None,
    ):
        self._factory = factory
        self._sessions: dict[str, tuple[Session, threading.Lock]] = {}
        self._guard = threading.Lock()
        self._logger = logger or logging.getLogger(__name__)

    def create(self) -> tuple[str, Session]:
        session_id = uuid.uuid4().hex
        session = self._factory()
        with self._guard:
            self._sessions[session_id] = (session, threading.Lock())
        self._logger.info(f"Created session {session_id} in {session.current_directory}")
        return session_id, session

    def get(self, session_id: str) -> Session:
        return self._entry(session_id)[0]

    def lock_for(self, session_id: str) -> threading.Lock:
        """Return the lock serializing commands on a session."""
        return self._entry(session_id)[1]

    def remove(self, session_id: str) -> None:
        if not self.discard(session_id):
            raise SessionNotFoundError(f"Unknown session: {session_id}")

    def discard(self, session_id: str) -> bool:
        """Forget a session if present. Returns whether it was."""
        with self._guard:
            found = self._sessions.pop(session_id, None) is not None
        if found:
            self._logger.info(f"Removed session {session_id}")
        return found

    def _entry(self, session_id: str) -> tuple[Session, threading.Lock]:
        with self._guard:
            try:
                return self._sessions[session_id]
            except KeyError:
                raise SessionNotFoundError(f"Unknown session: {session_id}")

    def __len__(self) -> int:
        return len(self._sessions)
