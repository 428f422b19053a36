"""Shared pytest fixtures."""

from collections.abc import Iterator

import pytest
from fastapi.testclient import TestClient

from sessiongate.app import App
from sessiongate.config import Config
from sessiongate.core.modules.session.store import InMemorySessionStore
from sessiongate.core.modules.user.models import Principal
from sessiongate.errors import CredentialStoreError
from sessiongate.web.server import create_fastapi_app


class FakeCredentialStore:
    """In-memory credential store keyed by (identifier, secret)."""

    def __init__(self, principals: dict[tuple[str, str], Principal] | None = None) -> None:
        self.principals = principals or {}
        self.fail = False
        self.lookups: list[str] = []

    async def find_principal(self, identifier: str, secret: str) -> Principal | None:
        self.lookups.append(identifier)
        if self.fail:
            raise CredentialStoreError("connection refused by mongodb://db:27017")
        return self.principals.get((identifier, secret))

    async def on_start(self) -> None:
        pass

    async def on_stop(self) -> None:
        pass


@pytest.fixture
def config():
    """Create a config that never touches a real database."""
    return Config(
        database_url="mongodb://localhost:27017/sessiongate_test",
        host="127.0.0.1",
        port=3333,
        debug=True,
        session_max_age_seconds=3600,
        session_sweep_interval_seconds=3600,
    )


@pytest.fixture
def principal():
    return Principal(id=1, name="A")


@pytest.fixture
def credential_store(principal):
    return FakeCredentialStore({("a@x.com", "p"): principal})


@pytest.fixture
def session_store():
    return InMemorySessionStore()


@pytest.fixture
def app(config, credential_store, session_store):
    return App(config, credential_store=credential_store, session_store=session_store)


@pytest.fixture
def client(app, config) -> Iterator[TestClient]:
    """TestClient that does not follow redirects, so Location headers can be checked."""
    with TestClient(create_fastapi_app(app, config), follow_redirects=False) as test_client:
        yield test_client

