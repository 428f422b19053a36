from pydantic import BaseModel, ConfigDict, Field

from sessiongate.core.modules.session.models import PrincipalId, SessionId


class TokenPayload(BaseModel):
    """Decoded `authToken` cookie. Carries the session reference and nothing else."""

    session_id: SessionId = Field(alias="sessionId", min_length=1)

    model_config = ConfigDict(populate_by_name=True, frozen=True)


class RequestUser(BaseModel):
    """Identity attached to an admitted request."""

    id: PrincipalId
    session_id: SessionId
