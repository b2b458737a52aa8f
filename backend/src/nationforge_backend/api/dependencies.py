"""Dependency providers for FastAPI routers."""

from __future__ import annotations

from functools import cache
from uuid import UUID

import jwt
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from nationforge_backend.api.services import AuthService, CountryService
from nationforge_backend.database import (
    CountryRepository,
    UserRepository,
    get_country_repository,
    get_session,
)
from nationforge_backend.game_logic import (
    BuildingCatalog,
    CountryStore,
    GameConfiguration,
    get_default_catalog,
    get_default_game_configuration,
)
from nationforge_backend.shared import Clock, SystemClock

_security = HTTPBearer(auto_error=False)


@cache
def get_auth_service() -> AuthService:
    """Return the shared :class:`AuthService` instance."""

    return AuthService()


def get_clock() -> Clock:
    """Return the time source used for resource advancement."""

    return SystemClock()


def get_building_catalog() -> BuildingCatalog:
    """Return the process-wide building catalog."""

    return get_default_catalog()


def get_game_configuration() -> GameConfiguration:
    """Return the gameplay configuration shared by every country."""

    return get_default_game_configuration()


def get_country_store(
    repository: CountryRepository = Depends(get_country_repository),
) -> CountryStore:
    """Return the store holding country aggregates."""

    return repository


def get_country_service(
    store: CountryStore = Depends(get_country_store),
    catalog: BuildingCatalog = Depends(get_building_catalog),
    configuration: GameConfiguration = Depends(get_game_configuration),
    clock: Clock = Depends(get_clock),
) -> CountryService:
    """Build a :class:`CountryService` for the current request."""

    return CountryService(
        store=store, catalog=catalog, configuration=configuration, clock=clock
    )


def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(_security),
    session: Session = Depends(get_session),
    auth_service: AuthService = Depends(get_auth_service),
):
    """Resolve the authenticated user from a bearer token."""

    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED, detail="Missing credentials"
        )

    try:
        payload = auth_service.decode_access_token(credentials.credentials)
    except jwt.PyJWTError as exc:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid token"
        ) from exc

    repository = UserRepository(session)
    try:
        user_id = UUID(payload.sub)
    except ValueError as exc:  # pragma: no cover - should not happen for valid tokens
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid token subject"
        ) from exc

    user = repository.get_by_id(user_id)
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED, detail="User not found"
        )

    return user


__all__ = [
    "get_auth_service",
    "get_building_catalog",
    "get_clock",
    "get_country_service",
    "get_country_store",
    "get_current_user",
    "get_game_configuration",
]
