from typing import Protocol

from pydantic import BaseModel

from sessiongate.core.db import MongoModel
from sessiongate.core.modules.session.models import PrincipalId


class User(MongoModel):
    """User document in the credential store."""

    email: str
    name: str
    password_hash: str  # bcrypt hash


class Principal(BaseModel):
    """Identity resolved by a successful credential check."""

    id: PrincipalId
    name: str

    @classmethod
    def from_domain(cls, user: User) -> "Principal":
        return cls(id=user.id, name=user.name)


class CredentialStore(Protocol):
    """Resolves an (identifier, secret) pair to at most one principal.

    Implementations own secret verification and raise CredentialStoreError on faults.
    """

    async def find_principal(self, identifier: str, secret: str) -> Principal | None: ...

    async def on_start(self) -> None: ...

    async def on_stop(self) -> None: ...
