"""Models used for API request and response payloads."""

from nationforge_backend.api.models.auth import (
    AuthTokenResponse,
    CurrentUserResponse,
    EmailCheckResponse,
    UserLoginRequest,
    UserLoginResponse,
    UserRegisterRequest,
    UserRegisterResponse,
    UserResponse,
)
from nationforge_backend.api.models.building import (
    BuildingStatusResponse,
    ConstructionRequest,
    ConstructionResponse,
)
from nationforge_backend.api.models.country import (
    CountryCreateRequest,
    CountryResponse,
    FlagUpdateRequest,
    MessageResponse,
)

__all__ = [
    "AuthTokenResponse",
    "BuildingStatusResponse",
    "ConstructionRequest",
    "ConstructionResponse",
    "CountryCreateRequest",
    "CountryResponse",
    "CurrentUserResponse",
    "EmailCheckResponse",
    "FlagUpdateRequest",
    "MessageResponse",
    "UserLoginRequest",
    "UserLoginResponse",
    "UserRegisterRequest",
    "UserRegisterResponse",
    "UserResponse",
]
