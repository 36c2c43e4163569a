"""User data API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends

from account_api.api.dependencies import get_auth_service, get_session_user_id
from account_api.schemas.auth import ApiResponse, UserData
from account_api.services.auth_service import AuthService

router = APIRouter(prefix="/api/user", tags=["user"])


@router.get("/data", response_model=ApiResponse, response_model_exclude_none=True)
def get_user_data(
    user_id: Annotated[str, Depends(get_session_user_id)],
    service: Annotated[AuthService, Depends(get_auth_service)],
):
    """Get the logged-in user's public profile."""
    user = service.get_user(user_id)
    return ApiResponse(
        success=True,
        user_data=UserData(name=user.name, is_account_verified=user.is_account_verified),
    )
