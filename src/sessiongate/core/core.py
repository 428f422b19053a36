from __future__ import annotations

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from datetime import timedelta
from typing import TYPE_CHECKING, Any
from urllib.parse import urlparse

from pymongo import AsyncMongoClient

from sessiongate.config import Config

if TYPE_CHECKING:
    from sessiongate.core.modules.session.service import SessionService
    from sessiongate.core.modules.session.store import SessionStore
    from sessiongate.core.modules.user.models import CredentialStore


class Service:
    """Base class for services with startup and shutdown hooks."""

    async def on_start(self) -> None:
        """Initialize service on application startup."""

    async def on_stop(self) -> None:
        """Cleanup service on application shutdown."""


class Services:
    """Service registry with lifecycle management."""

    user: CredentialStore
    session: SessionService

    def __init__(self, user: CredentialStore, session: SessionService) -> None:
        # Order matters for startup: the credential store comes first
        self.user = user
        self.session = session
        self._services: list[Service | CredentialStore] = [user, session]

    async def start_all(self) -> None:
        for service in self._services:
            await service.on_start()

    async def stop_all(self) -> None:
        for service in reversed(self._services):
            await service.on_stop()


class Core:
    """Container providing config, the credential store connection, and all service instances."""

    config: Config
    mongo_client: AsyncMongoClient[dict[str, Any]] | None
    services: Services

    def __init__(
        self,
        config: Config,
        credential_store: CredentialStore | None = None,
        session_store: SessionStore | None = None,
    ) -> None:
        """Initialize core; the MongoDB credential store is used unless another one is given."""
        from sessiongate.core.modules.session.service import SessionService  # noqa: PLC0415
        from sessiongate.core.modules.session.store import InMemorySessionStore  # noqa: PLC0415
        from sessiongate.core.modules.user.service import UserService  # noqa: PLC0415

        self.config = config
        self.mongo_client = None
        if credential_store is None:
            self.mongo_client = AsyncMongoClient(
                config.database_url,
                uuidRepresentation="standard",
                timeoutMS=config.credential_store_timeout_ms,
            )
            database = self.mongo_client.get_database(urlparse(config.database_url).path[1:])
            credential_store = UserService(database)

        session_service = SessionService(
            session_store if session_store is not None else InMemorySessionStore(),
            max_age=timedelta(seconds=config.session_max_age_seconds),
            sweep_interval=timedelta(seconds=config.session_sweep_interval_seconds),
        )
        self.services = Services(user=credential_store, session=session_service)

    @asynccontextmanager
    async def lifespan(self) -> AsyncGenerator[None]:
        """Manage application lifecycle - startup and shutdown."""
        await self.on_start()
        try:
            yield
        finally:
            await self.on_stop()

    async def on_start(self) -> None:
        await self.services.start_all()

    async def on_stop(self) -> None:
        """Stop services and close the MongoDB connection on shutdown."""
        await self.services.stop_all()
        if self.mongo_client is not None:
            await self.mongo_client.aclose()
