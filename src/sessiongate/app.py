from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import structlog

from sessiongate.config import Config
from sessiongate.core.core import Core
from sessiongate.core.modules.auth.gate import AuthGate
from sessiongate.core.modules.auth.models import RequestUser
from sessiongate.core.modules.auth.token import decode_auth_token, encode_auth_token
from sessiongate.core.modules.session.models import SessionRecord
from sessiongate.core.modules.session.store import SessionStore
from sessiongate.core.modules.user.models import CredentialStore
from sessiongate.errors import InvalidCredentialsError, SessionExpiredError
from sessiongate.utils import short_id

logger = structlog.get_logger(__name__)


class App:
    """Facade for all login gateway operations, delegating to Core."""

    def __init__(
        self,
        config: Config,
        *,
        credential_store: CredentialStore | None = None,
        session_store: SessionStore | None = None,
    ) -> None:
        self._core = Core(config, credential_store=credential_store, session_store=session_store)
        self._gate = AuthGate(self._core.services.session)

    @property
    def config(self) -> Config:
        return self._core.config

    @asynccontextmanager
    async def lifespan(self) -> AsyncGenerator[None]:
        """Application lifespan management - delegates to Core."""
        async with self._core.lifespan():
            yield

    async def login(self, username: str, password: str) -> str:
        """Check credentials, open a session and return the cookie token for it.

        The credential lookup runs before any session state is touched, so an
        aborted request leaves nothing behind.
        """
        principal = await self._core.services.user.find_principal(username, password)
        if principal is None:
            logger.info("login_rejected")
            raise InvalidCredentialsError
        session_id = self._core.services.session.start_session(principal)
        logger.info("user_logged_in", user_id=str(principal.id), name=principal.name, session_id=short_id(session_id))
        return encode_auth_token(session_id)

    def logout(self, auth_token: str | None) -> None:
        """End the session referenced by a token; unusable tokens are ignored."""
        session_id = decode_auth_token(auth_token)
        if session_id is None:
            if auth_token:
                logger.warning("logout_with_invalid_token")
            return
        self._core.services.session.end_session(session_id)

    def authenticate(self, auth_token: str | None) -> RequestUser | None:
        """Run the auth gate on a raw cookie value."""
        return self._gate.check(auth_token)

    def get_session(self, user: RequestUser) -> SessionRecord:
        """Get the session behind an admitted request."""
        record = self._core.services.session.get_active(user.session_id)
        if record is None:
            raise SessionExpiredError
        return record
