import logging
from urllib.parse import quote

from fastapi import Request
from fastapi.responses import JSONResponse, RedirectResponse, Response

from sessiongate.errors import AuthenticationError, InvalidCredentialsError, SessionExpiredError

logger = logging.getLogger(__name__)

LOGIN_PAGE = "/login.html"


def create_json_error_response(status_code: int, message: str, error_type: str | None = None) -> JSONResponse:
    """Create JSON error response with optional type for machine parsing."""
    content = {"message": message}
    if error_type:
        content["type"] = error_type
    return JSONResponse(status_code=status_code, content=content)


def login_redirect(error: str | None = None) -> RedirectResponse:
    url = LOGIN_PAGE
    if error:
        url = f"{LOGIN_PAGE}?error={quote(error)}"
    return RedirectResponse(url=url, status_code=302)


async def user_error_handler(_: Request, exc: Exception) -> Response:
    """Handle all UserError subclasses; authentication failures become login redirects."""
    if isinstance(exc, InvalidCredentialsError):
        return login_redirect(str(exc))
    if isinstance(exc, AuthenticationError):
        return login_redirect()
    if isinstance(exc, SessionExpiredError):
        return create_json_error_response(status_code=401, message=str(exc), error_type="session_expired")
    return create_json_error_response(status_code=400, message=str(exc), error_type="bad_request")


async def credential_store_error_handler(_: Request, exc: Exception) -> Response:
    """Credential store faults become a generic 500; details stay in the log."""
    logger.error("Credential store failure: %s", exc)
    return create_json_error_response(
        status_code=500, message="Internal Server Error", error_type="internal_server_error"
    )


async def general_exception_handler(_: Request, exc: Exception) -> Response:
    """Handle unexpected errors (500)."""
    logger.exception("Unexpected error: %s", exc)
    return create_json_error_response(
        status_code=500, message="An unexpected error occurred.", error_type="internal_server_error"
    )
