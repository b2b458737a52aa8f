"""Pydantic models for authentication endpoints."""

from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import AliasGenerator, BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

USERNAME_PATTERN = r"^[A-Za-z0-9_]{3,32}$"
EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"
PASSWORD_MIN_LENGTH = 8
PASSWORD_MAX_LENGTH = 64


def _check_password_strength(value: str) -> str:
    if not any(char.isalpha() for char in value):
        msg = "password must contain at least one letter"
        raise ValueError(msg)
    if not any(char.isdigit() for char in value):
        msg = "password must contain at least one digit"
        raise ValueError(msg)
    return value


class UserResponse(BaseModel):
    """Public representation of a registered user."""

    model_config = ConfigDict(
        populate_by_name=True,
        from_attributes=True,
        alias_generator=AliasGenerator(serialization_alias=to_camel),
    )

    id_: UUID = Field(alias="id")
    username: str
    email: str
    has_country: bool
    created_at: datetime
    updated_at: datetime


_CAMEL_OUTPUT = ConfigDict(
    populate_by_name=True,
    alias_generator=AliasGenerator(serialization_alias=to_camel),
)


class CurrentUserResponse(BaseModel):
    """Compact identity of the authenticated user."""

    model_config = _CAMEL_OUTPUT

    id_: UUID = Field(alias="id")
    username: str
    has_country: bool


class EmailCheckResponse(BaseModel):
    """Whether an e-mail address belongs to a registered user."""

    model_config = _CAMEL_OUTPUT

    exists: bool
    user_id: UUID | None = None
    username: str | None = None
    has_country: bool | None = None


class AuthTokenResponse(BaseModel):
    """Bearer token payload returned by the API."""

    access_token: str
    token_type: str = "bearer"


class UserRegisterRequest(BaseModel):
    """Payload for creating a new user."""

    username: str = Field(pattern=USERNAME_PATTERN)
    email: str = Field(pattern=EMAIL_PATTERN, max_length=255)
    password: str = Field(
        min_length=PASSWORD_MIN_LENGTH, max_length=PASSWORD_MAX_LENGTH
    )

    @field_validator("email")
    @classmethod
    def normalize_email(cls, value: str) -> str:
        return value.strip().lower()

    @field_validator("password")
    @classmethod
    def validate_password(cls, value: str) -> str:
        return _check_password_strength(value)


class UserRegisterResponse(BaseModel):
    """Response returned after a successful registration."""

    user: UserResponse
    token: AuthTokenResponse


class UserLoginRequest(BaseModel):
    """Payload for authenticating an existing user."""

    email: str = Field(pattern=EMAIL_PATTERN, max_length=255)
    password: str = Field(
        min_length=PASSWORD_MIN_LENGTH, max_length=PASSWORD_MAX_LENGTH
    )

    @field_validator("email")
    @classmethod
    def normalize_email(cls, value: str) -> str:
        return value.strip().lower()


class UserLoginResponse(BaseModel):
    """Response returned after a successful authentication."""

    user: UserResponse
    token: AuthTokenResponse
