import secrets
import threading
from datetime import timedelta
from typing import Protocol

from sessiongate.core.modules.session.models import PrincipalId, SessionId, SessionRecord
from sessiongate.utils import now

SESSION_ID_BYTES = 32


class SessionStore(Protocol):
    """Authoritative set of active sessions."""

    def create(self, user_id: PrincipalId, username: str) -> SessionId: ...

    def get(self, session_id: SessionId) -> SessionRecord | None: ...

    def remove(self, session_id: SessionId) -> bool: ...

    def sweep_expired(self, max_age: timedelta) -> int: ...

    def __len__(self) -> int: ...


class InMemorySessionStore:
    """Process-local session store guarded by a single lock.

    Everything is lost on restart, which invalidates every issued token.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._sessions: dict[SessionId, SessionRecord] = {}

    def create(self, user_id: PrincipalId, username: str) -> SessionId:
        with self._lock:
            session_id = SessionId(secrets.token_urlsafe(SESSION_ID_BYTES))
            while session_id in self._sessions:
                session_id = SessionId(secrets.token_urlsafe(SESSION_ID_BYTES))
            self._sessions[session_id] = SessionRecord(session_id=session_id, user_id=user_id, username=username)
        return session_id

    def get(self, session_id: SessionId) -> SessionRecord | None:
        with self._lock:
            return self._sessions.get(session_id)

    def remove(self, session_id: SessionId) -> bool:
        """Delete a session if present; returns whether anything was deleted."""
        with self._lock:
            return self._sessions.pop(session_id, None) is not None

    def sweep_expired(self, max_age: timedelta) -> int:
        """Drop sessions at least max_age old, return how many were dropped."""
        cutoff = now() - max_age
        with self._lock:
            expired = [sid for sid, record in self._sessions.items() if record.created_at <= cutoff]
            for sid in expired:
                del self._sessions[sid]
        return len(expired)

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)
