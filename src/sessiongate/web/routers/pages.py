from fastapi import APIRouter
from fastapi.responses import FileResponse
from pydantic import BaseModel, Field

from sessiongate.core.modules.session.models import PrincipalId
from sessiongate.web.deps import AppDep, CurrentUserDep
from sessiongate.web.openapi import ErrorResponse

router = APIRouter(tags=["pages"])


class UserDataResponse(BaseModel):
    """Session details of the current user."""

    user_id: PrincipalId = Field(..., serialization_alias="userId", description="Principal ID")
    username: str = Field(..., description="Display name resolved at login")
    timestamp: int = Field(..., description="Session creation time, epoch milliseconds")


@router.get("/", include_in_schema=False)
@router.get("/home", include_in_schema=False)
async def home(app: AppDep, _: CurrentUserDep) -> FileResponse:
    return FileResponse(app.config.public_path / "home.html")


@router.post(
    "/get-user-data",
    summary="Get session user data",
    operation_id="getUserData",
    response_model_by_alias=True,
    responses={401: {"model": ErrorResponse, "description": "Session expired or invalid"}},
)
async def get_user_data(app: AppDep, user: CurrentUserDep) -> UserDataResponse:
    record = app.get_session(user)
    created_ms = int(record.created_at.timestamp() * 1000)
    return UserDataResponse(user_id=record.user_id, username=record.username, timestamp=created_ms)
