import logging
import uuid
from abc import ABC, abstractmethod
from datetime import datetime, timedelta, timezone
from typing import Optional, Dict

from ..state.models import SessionState

logger = logging.getLogger(__name__)


class SessionRepository(ABC):
    """
    Defines how the application accesses workspace sessions.
    Sessions are ephemeral, so the only implementation keeps them in memory,
    but the WorkspaceService only ever talks to this interface.
    """

    @abstractmethod
    def create(self) -> SessionState:
        """Creates a new session, seeded with the default source code."""
        pass

    @abstractmethod
    def get(self, session_id: str) -> Optional[SessionState]:
        """Retrieves a session by ID."""
        pass

    @abstractmethod
    def save(self, session: SessionState):
        """Stores the session state."""
        pass

    @abstractmethod
    def delete(self, session_id: str) -> bool:
        """Deletes a session. Returns True if found and deleted."""
        pass


class InMemorySessionRepository(SessionRepository):
    """
    Dictionary backed session storage. Everything is lost when the process exits.

    Pages that never delete their session (closed tab, lost keepalive request)
    would otherwise stay here forever, so sessions idle for longer than
    `ttl_seconds` are evicted whenever a session is created or looked up.
    Sessions with a request in flight are never evicted.
    """

    def __init__(self, ttl_seconds: int = 0):
        self._store: Dict[str, SessionState] = {}
        self.ttl = timedelta(seconds=ttl_seconds) if ttl_seconds > 0 else None

    def create(self) -> SessionState:
        self._evict_idle()
        new_id = str(uuid.uuid4())
        session = SessionState(session_id=new_id)
        self._store[new_id] = session
        return session

    def get(self, session_id: str) -> Optional[SessionState]:
        self._evict_idle()
        return self._store.get(session_id)

    def save(self, session: SessionState):
        session.touch()
        self._store[session.session_id] = session

    def delete(self, session_id: str) -> bool:
        if session_id in self._store:
            del self._store[session_id]
            return True
        return False

    def _evict_idle(self):
        if self.ttl is None:
            return
        cutoff = datetime.now(timezone.utc) - self.ttl
        expired = [
            session_id
            for session_id, session in self._store.items()
            if session.updated_at < cutoff
            and not (session.is_translating or session.is_explaining)
        ]
        for session_id in expired:
            del self._store[session_id]
        if expired:
            logger.info(f"Evicted {len(expired)} idle session(s)")
