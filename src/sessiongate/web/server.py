from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from sessiongate.app import App
from sessiongate.config import Config
from sessiongate.errors import CredentialStoreError, UserError
from sessiongate.web.error_handlers import (
    credential_store_error_handler,
    general_exception_handler,
    user_error_handler,
)
from sessiongate.web.openapi import set_custom_openapi
from sessiongate.web.routers import auth_router, pages_router


def create_fastapi_app(app_instance: App, config: Config) -> FastAPI:
    """Create and configure FastAPI application."""

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
        """FastAPI application lifespan management."""
        async with app_instance.lifespan():
            yield

    app = FastAPI(
        title="sessiongate",
        lifespan=lifespan,
    )
    # Set before startup so requests never see a missing facade
    app.state.app = app_instance

    if config.cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=config.cors_origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    @app.get("/health")
    async def health_check() -> dict[str, str]:
        return {"status": "healthy"}

    app.include_router(auth_router)
    app.include_router(pages_router)

    # Static pages (login.html and friends); mounted last so routes win
    app.mount("/", StaticFiles(directory=config.public_path), name="public")

    app.add_exception_handler(UserError, user_error_handler)
    app.add_exception_handler(CredentialStoreError, credential_store_error_handler)
    app.add_exception_handler(Exception, general_exception_handler)

    set_custom_openapi(app)

    return app
