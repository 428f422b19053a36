"""Tests for the MongoDB credential store."""

import asyncio
from unittest.mock import AsyncMock, MagicMock
from uuid import UUID

import bcrypt
import pytest
from pymongo.errors import ServerSelectionTimeoutError

from sessiongate.core.modules.user.service import UserService, verify_password
from sessiongate.errors import CredentialStoreError

USER_ID = UUID("87654321-4321-8765-4321-876543218765")


def _fast_hash(password: str) -> str:
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt(rounds=4)).decode("utf-8")


class TestVerifyPassword:
    def test_matching_password(self):
        assert verify_password("secret", _fast_hash("secret")) is True

    def test_wrong_password(self):
        assert verify_password("wrong", _fast_hash("secret")) is False

    def test_malformed_hash_never_matches(self):
        """Test that a plaintext value in the hash column does not match itself."""
        assert verify_password("secret", "secret") is False


class TestUserService:
    """Tests for find_principal and create_user against a mocked collection."""

    @pytest.fixture(autouse=True)
    def setup(self):
        self.collection = MagicMock()
        self.collection.find_one = AsyncMock()
        self.collection.insert_one = AsyncMock()
        self.collection.create_index = AsyncMock()
        database = MagicMock()
        database.get_collection.return_value = self.collection
        self.service = UserService(database)
        self.document = {"_id": USER_ID, "email": "a@x.com", "name": "A", "password_hash": _fast_hash("p")}

    def test_matching_credentials_return_principal(self):
        self.collection.find_one.return_value = self.document
        principal = asyncio.run(self.service.find_principal("a@x.com", "p"))
        assert principal is not None
        assert principal.id == USER_ID
        assert principal.name == "A"
        self.collection.find_one.assert_awaited_once_with({"email": "a@x.com"})

    def test_unknown_user_returns_none(self):
        self.collection.find_one.return_value = None
        assert asyncio.run(self.service.find_principal("nobody@x.com", "p")) is None

    def test_wrong_secret_returns_none(self):
        self.collection.find_one.return_value = self.document
        assert asyncio.run(self.service.find_principal("a@x.com", "nope")) is None

    def test_store_fault_raises_credential_store_error(self):
        self.collection.find_one.side_effect = ServerSelectionTimeoutError("db:27017 timed out")
        with pytest.raises(CredentialStoreError):
            asyncio.run(self.service.find_principal("a@x.com", "p"))

    def test_create_user_stores_hash_not_password(self):
        user = asyncio.run(self.service.create_user("b@x.com", "B", "hunter2"))
        stored = self.collection.insert_one.await_args.args[0]
        assert stored["_id"] == user.id
        assert stored["email"] == "b@x.com"
        assert stored["password_hash"] != "hunter2"
        assert verify_password("hunter2", stored["password_hash"])

    def test_on_start_creates_email_index(self):
        asyncio.run(self.service.on_start())
        self.collection.create_index.assert_awaited_once_with([("email", 1)], unique=True)
