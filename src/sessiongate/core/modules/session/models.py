"""Session management models."""

from datetime import datetime
from typing import NewType
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from sessiongate.utils import now

SessionId = NewType("SessionId", str)
PrincipalId = int | UUID


class SessionRecord(BaseModel):
    """One authenticated browser session.

    Exists only between a successful credential check and logout or expiry.
    """

    session_id: SessionId
    user_id: PrincipalId
    username: str
    created_at: datetime = Field(default_factory=now)

    model_config = ConfigDict(frozen=True)

    def age_seconds(self, at: datetime | None = None) -> float:
        return ((at or now()) - self.created_at).total_seconds()
