from sessiongate.core.modules.auth.models import RequestUser
from sessiongate.core.modules.auth.token import decode_auth_token
from sessiongate.core.modules.session.service import SessionService


class AuthGate:
    """Admits a request when its token resolves to an active session.

    Read-only with respect to sessions.
    """

    def __init__(self, sessions: SessionService) -> None:
        self._sessions = sessions

    def check(self, raw_token: str | None) -> RequestUser | None:
        session_id = decode_auth_token(raw_token)
        if session_id is None:
            return None
        record = self._sessions.get_active(session_id)
        if record is None:
            return None
        return RequestUser(id=record.user_id, session_id=record.session_id)
