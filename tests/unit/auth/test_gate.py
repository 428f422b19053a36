"""Tests for the auth gate check."""

from datetime import timedelta

import pytest

from sessiongate.core.modules.auth.gate import AuthGate
from sessiongate.core.modules.auth.token import encode_auth_token
from sessiongate.core.modules.session.models import SessionId
from sessiongate.core.modules.session.service import SessionService
from sessiongate.utils import now


class TestAuthGate:
    """Tests for admit/reject decisions."""

    @pytest.fixture(autouse=True)
    def setup(self, session_store, principal):
        self.store = session_store
        self.gate = AuthGate(
            SessionService(session_store, max_age=timedelta(hours=1), sweep_interval=timedelta(minutes=1))
        )
        self.session_id = session_store.create(principal.id, principal.name)

    def test_valid_token_is_admitted(self):
        user = self.gate.check(encode_auth_token(self.session_id))
        assert user is not None
        assert user.id == 1
        assert user.session_id == self.session_id

    def test_no_token_is_rejected(self):
        assert self.gate.check(None) is None

    def test_malformed_token_is_rejected(self):
        assert self.gate.check("definitely{not}base64") is None

    def test_unknown_session_is_rejected(self):
        assert self.gate.check(encode_auth_token(SessionId("forged-session-id"))) is None

    def test_removed_session_is_rejected(self):
        token = encode_auth_token(self.session_id)
        self.store.remove(self.session_id)
        assert self.gate.check(token) is None

    def test_expired_session_is_rejected(self):
        self.store._sessions[self.session_id] = self.store._sessions[self.session_id].model_copy(
            update={"created_at": now() - timedelta(hours=2)}
        )
        assert self.gate.check(encode_auth_token(self.session_id)) is None

    def test_check_never_mutates_store(self):
        self.gate.check(encode_auth_token(self.session_id))
        self.gate.check(encode_auth_token(SessionId("forged")))
        self.gate.check("garbage")
        assert len(self.store) == 1
