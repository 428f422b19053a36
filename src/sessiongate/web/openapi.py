from typing import Any

from fastapi import FastAPI
from fastapi.openapi.utils import get_openapi
from pydantic import BaseModel, Field

from sessiongate.core.modules.auth.token import AUTH_COOKIE_NAME


def set_custom_openapi(app: FastAPI) -> None:
    def custom_openapi() -> dict[str, Any]:
        if app.openapi_schema:
            return app.openapi_schema

        openapi_schema = get_openapi(
            title="sessiongate",
            version="0.1.0",
            summary="Cookie session login gateway",
            routes=app.routes,
        )

        openapi_schema.setdefault("components", {})["securitySchemes"] = {
            "AuthTokenCookie": {
                "type": "apiKey",
                "in": "cookie",
                "name": AUTH_COOKIE_NAME,
                "description": "Base64 session reference issued by /login",
            },
        }
        openapi_schema["security"] = [{"AuthTokenCookie": []}]

        # Remove security from public endpoints
        public_endpoints = {
            ("POST", "/login"),
            ("GET", "/logout"),
            ("GET", "/health"),
        }
        for path, path_item in openapi_schema["paths"].items():
            for method, operation in path_item.items():
                if (method.upper(), path) in public_endpoints:
                    operation["security"] = []

        app.openapi_schema = openapi_schema
        return app.openapi_schema

    app.openapi = custom_openapi  # type: ignore[method-assign]


class ErrorResponse(BaseModel):
    """Standard error response format."""

    message: str = Field(..., description="Human-readable error message")
    type: str = Field(..., description="Machine-readable error type")

    model_config = {
        "json_schema_extra": {
            "examples": [
                {"message": "Session expired or invalid.", "type": "session_expired"},
                {"message": "Internal Server Error", "type": "internal_server_error"},
            ]
        }
    }
