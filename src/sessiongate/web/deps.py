from typing import Annotated, cast

from fastapi import Depends, Request
from fastapi.security import APIKeyCookie

from sessiongate.app import App
from sessiongate.core.modules.auth.models import RequestUser
from sessiongate.core.modules.auth.token import AUTH_COOKIE_NAME
from sessiongate.errors import AuthenticationError

cookie_scheme = APIKeyCookie(name=AUTH_COOKIE_NAME, auto_error=False)


async def get_app(request: Request) -> App:
    return cast(App, request.app.state.app)


async def get_current_user(
    request: Request,
    app: Annotated[App, Depends(get_app)],
    auth_token: Annotated[str | None, Depends(cookie_scheme)] = None,
) -> RequestUser:
    """Auth gate for protected routes; attaches the caller to request.state.user."""
    user = app.authenticate(auth_token)
    if user is None:
        raise AuthenticationError
    request.state.user = user
    return user


# Type aliases for dependencies
AppDep = Annotated[App, Depends(get_app)]
AuthTokenCookie = Annotated[str | None, Depends(cookie_scheme)]
CurrentUserDep = Annotated[RequestUser, Depends(get_current_user)]
