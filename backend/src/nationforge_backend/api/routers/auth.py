"""Authentication endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from nationforge_backend.api.dependencies import get_auth_service, get_current_user
from nationforge_backend.api.models import (
    AuthTokenResponse,
    CurrentUserResponse,
    EmailCheckResponse,
    UserLoginRequest,
    UserLoginResponse,
    UserRegisterRequest,
    UserRegisterResponse,
    UserResponse,
)
from nationforge_backend.api.services import (
    AuthService,
    InvalidCredentialsError,
    UserAlreadyExistsError,
)
from nationforge_backend.database import UserSchema, get_session

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post(
    "/register",
    response_model=UserRegisterResponse,
    status_code=status.HTTP_201_CREATED,
)
def register_user(
    payload: UserRegisterRequest,
    session: Session = Depends(get_session),
    auth_service: AuthService = Depends(get_auth_service),
) -> UserRegisterResponse:
    """Register a new user and issue an access token."""

    try:
        user, token = auth_service.register_user(
            session=session,
            username=payload.username,
            email=payload.email,
            password=payload.password,
        )
    except UserAlreadyExistsError as exc:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT, detail="User already exists"
        ) from exc

    user_model = UserResponse.model_validate(user, from_attributes=True)
    token_model = AuthTokenResponse(access_token=token)
    return UserRegisterResponse(user=user_model, token=token_model)


@router.post("/login", response_model=UserLoginResponse)
def login_user(
    payload: UserLoginRequest,
    session: Session = Depends(get_session),
    auth_service: AuthService = Depends(get_auth_service),
) -> UserLoginResponse:
    """Authenticate an existing user using e-mail and password."""

    try:
        user, token = auth_service.authenticate_user(
            session=session, email=payload.email, password=payload.password
        )
    except InvalidCredentialsError as exc:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid credentials"
        ) from exc

    user_model = UserResponse.model_validate(user, from_attributes=True)
    token_model = AuthTokenResponse(access_token=token)
    return UserLoginResponse(user=user_model, token=token_model)


@router.get("/me", response_model=CurrentUserResponse)
def read_current_user(
    current_user: UserSchema = Depends(get_current_user),
) -> CurrentUserResponse:
    """Return the identity carried by the bearer token."""

    return CurrentUserResponse(
        id_=current_user.id,
        username=current_user.username,
        has_country=current_user.has_country,
    )


@router.get(
    "/check-email/{email}",
    response_model=EmailCheckResponse,
    response_model_exclude_none=True,
)
def check_email(
    email: str,
    session: Session = Depends(get_session),
    auth_service: AuthService = Depends(get_auth_service),
) -> EmailCheckResponse:
    """Report whether *email* is already registered."""

    user = auth_service.find_user_by_email(session=session, email=email)
    if user is None:
        return EmailCheckResponse(exists=False)
    return EmailCheckResponse(
        exists=True,
        user_id=user.id,
        username=user.username,
        has_country=user.has_country,
    )
