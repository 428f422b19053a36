from typing import Annotated

from fastapi import APIRouter, Form
from fastapi.responses import RedirectResponse

from sessiongate.core.modules.auth.token import AUTH_COOKIE_NAME
from sessiongate.web.deps import AppDep, AuthTokenCookie
from sessiongate.web.error_handlers import login_redirect
from sessiongate.web.openapi import ErrorResponse

router = APIRouter(tags=["auth"])


@router.post(
    "/login",
    summary="Authenticate user",
    description="Check username and password, open a session and set the authToken cookie.",
    operation_id="login",
    response_class=RedirectResponse,
    responses={
        302: {"description": "Redirect to /home on success, to /login.html?error=... otherwise"},
        500: {"model": ErrorResponse, "description": "Credential store unavailable"},
    },
)
async def login(
    app: AppDep,
    username: Annotated[str, Form()],
    password: Annotated[str, Form()],
) -> RedirectResponse:
    token = await app.login(username, password)

    response = RedirectResponse(url="/home", status_code=302)
    response.set_cookie(
        key=AUTH_COOKIE_NAME,
        value=token,
        httponly=True,
        samesite="lax",
        secure=app.config.cookie_secure,
        max_age=app.config.session_max_age_seconds,
    )
    return response


@router.get(
    "/logout",
    summary="End session",
    description="Remove the current session, if any, and clear the authToken cookie.",
    operation_id="logout",
    response_class=RedirectResponse,
    responses={302: {"description": "Always redirects to /login.html"}},
)
async def logout(app: AppDep, auth_token: AuthTokenCookie) -> RedirectResponse:
    app.logout(auth_token)
    response = login_redirect()
    response.delete_cookie(AUTH_COOKIE_NAME, httponly=True, samesite="lax", secure=app.config.cookie_secure)
    return response
