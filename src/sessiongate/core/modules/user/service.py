from typing import Any

import bcrypt
import structlog
from pymongo.asynchronous.database import AsyncDatabase
from pymongo.errors import PyMongoError

from sessiongate.core.core import Service
from sessiongate.core.modules.user.models import Principal, User
from sessiongate.errors import CredentialStoreError

logger = structlog.get_logger(__name__)


def hash_password(password: str) -> str:
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt()).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    """Check a password against a bcrypt hash; a malformed hash never matches."""
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError:
        return False


class UserService(Service):
    """MongoDB-backed credential store."""

    def __init__(self, database: AsyncDatabase[dict[str, Any]]) -> None:
        self._collection = database.get_collection("users")

    async def find_principal(self, identifier: str, secret: str) -> Principal | None:
        """Resolve an email/password pair to a principal, or None when nothing matches."""
        try:
            document = await self._collection.find_one({"email": identifier})
        except PyMongoError as e:
            logger.exception("credential_store_error", operation="find_principal")
            raise CredentialStoreError(str(e)) from e

        if document is None:
            return None
        user = User.model_validate(document)
        if not verify_password(secret, user.password_hash):
            return None
        return Principal.from_domain(user)

    async def create_user(self, email: str, name: str, password: str) -> User:
        """Insert a user with a bcrypt-hashed password."""
        user = User(email=email, name=name, password_hash=hash_password(password))
        try:
            await self._collection.insert_one(user.to_mongo())
        except PyMongoError as e:
            logger.exception("credential_store_error", operation="create_user")
            raise CredentialStoreError(str(e)) from e
        return user

    async def on_start(self) -> None:
        """Create the lookup index."""
        await self._collection.create_index([("email", 1)], unique=True)
        logger.debug("user_service_started")
