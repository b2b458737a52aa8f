"""User profile endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from nationforge_backend.api.dependencies import get_current_user
from nationforge_backend.api.models import UserResponse
from nationforge_backend.database import UserSchema

router = APIRouter(prefix="/users", tags=["users"])


@router.get("/profile", response_model=UserResponse)
def read_profile(current_user: UserSchema = Depends(get_current_user)) -> UserResponse:
    """Return the authenticated user's profile."""

    return UserResponse.model_validate(current_user, from_attributes=True)
