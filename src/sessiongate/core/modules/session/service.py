import asyncio
import contextlib
from datetime import timedelta

import structlog

from sessiongate.core.core import Service
from sessiongate.core.modules.session.models import SessionId, SessionRecord
from sessiongate.core.modules.session.store import SessionStore
from sessiongate.core.modules.user.models import Principal
from sessiongate.utils import short_id

logger = structlog.get_logger(__name__)


class SessionService(Service):
    """Session lifecycle on top of a SessionStore, with expiry."""

    def __init__(self, store: SessionStore, max_age: timedelta, sweep_interval: timedelta) -> None:
        self._store = store
        self._max_age = max_age
        self._sweep_interval = sweep_interval
        self._sweep_task: asyncio.Task[None] | None = None

    def start_session(self, principal: Principal) -> SessionId:
        """Create a session for a principal that just passed the credential check."""
        session_id = self._store.create(principal.id, principal.name)
        logger.info("session_created", user_id=str(principal.id), session_id=short_id(session_id))
        return session_id

    def get_active(self, session_id: SessionId) -> SessionRecord | None:
        """Return the session if it exists and has not outlived max_age.

        Expired records are left for the sweeper; reads never mutate the store.
        """
        record = self._store.get(session_id)
        if record is None:
            return None
        if record.age_seconds() >= self._max_age.total_seconds():
            return None
        return record

    def end_session(self, session_id: SessionId) -> bool:
        """Remove a session; returns False when it was already gone."""
        removed = self._store.remove(session_id)
        if removed:
            logger.info("session_removed", session_id=short_id(session_id))
        else:
            logger.debug("session_already_absent", session_id=short_id(session_id))
        return removed

    def sweep(self) -> int:
        removed = self._store.sweep_expired(self._max_age)
        if removed:
            logger.info("sessions_swept", removed=removed, active=len(self._store))
        return removed

    async def _sweep_loop(self) -> None:
        while True:
            await asyncio.sleep(self._sweep_interval.total_seconds())
            self.sweep()

    async def on_start(self) -> None:
        """Launch the periodic expiry sweep."""
        self._sweep_task = asyncio.create_task(self._sweep_loop())
        logger.debug("session_service_started", max_age=int(self._max_age.total_seconds()))

    async def on_stop(self) -> None:
        """Cancel the expiry sweep."""
        if self._sweep_task is None:
            return
        self._sweep_task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await self._sweep_task
        self._sweep_task = None
