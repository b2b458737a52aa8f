"""Service layer for API-specific business logic."""

from nationforge_backend.api.services.auth import (
    AuthService,
    InvalidCredentialsError,
    TokenPayload,
    UserAlreadyExistsError,
)
from nationforge_backend.api.services.country import (
    CountryAlreadyExistsError,
    CountryNameTakenError,
    CountryNotFoundError,
    CountryService,
)

__all__ = [
    "AuthService",
    "CountryAlreadyExistsError",
    "CountryNameTakenError",
    "CountryNotFoundError",
    "CountryService",
    "InvalidCredentialsError",
    "TokenPayload",
    "UserAlreadyExistsError",
]
