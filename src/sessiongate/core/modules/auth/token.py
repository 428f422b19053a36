"""Encoding of the `authToken` cookie.

The cookie value is standard base64 over the JSON object ``{"sessionId": ...}``.
Session contents stay on the server.
"""

import base64

from sessiongate.core.modules.auth.models import TokenPayload
from sessiongate.core.modules.session.models import SessionId

AUTH_COOKIE_NAME = "authToken"


def encode_auth_token(session_id: SessionId) -> str:
    payload = TokenPayload(session_id=session_id).model_dump_json(by_alias=True)
    return base64.b64encode(payload.encode("utf-8")).decode("ascii")


def decode_auth_token(raw: str | None) -> SessionId | None:
    """Recover the session id from a cookie value, or None if it is unusable."""
    if not raw:
        return None
    try:
        decoded = base64.b64decode(raw, validate=True)
        payload = TokenPayload.model_validate_json(decoded)
    except ValueError:
        return None
    return payload.session_id
