"""Country lifecycle endpoints."""

from __future__ import annotations

from typing import Any
from uuid import UUID

from fastapi import APIRouter, Body, Depends, HTTPException, status
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError

from nationforge_backend.api.dependencies import get_country_service, get_current_user
from nationforge_backend.api.models import (
    CountryCreateRequest,
    CountryResponse,
    FlagUpdateRequest,
    MessageResponse,
)
from nationforge_backend.api.services import (
    CountryAlreadyExistsError,
    CountryNameTakenError,
    CountryNotFoundError,
    CountryService,
)
from nationforge_backend.database import UserSchema
from nationforge_backend.shared import ProductionRates

router = APIRouter(prefix="/countries", tags=["countries"])

UPDATABLE_FIELDS = frozenset({"flag"})


def _country_not_found() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND, detail="Country not found"
    )


@router.post(
    "",
    response_model=CountryResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_country(
    payload: CountryCreateRequest,
    current_user: UserSchema = Depends(get_current_user),
    service: CountryService = Depends(get_country_service),
) -> CountryResponse:
    """Found a country for the authenticated user."""

    try:
        country = service.create_country(
            owner_id=current_user.id,
            name=payload.name,
            government=payload.government,
            values=payload.values,
            flag=payload.flag,
        )
    except CountryAlreadyExistsError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="User already has a country",
        ) from exc
    except CountryNameTakenError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Country name already exists",
        ) from exc

    current_user.has_country = True
    return CountryResponse.from_state(country)


@router.get("/my-country", response_model=CountryResponse)
def read_my_country(
    current_user: UserSchema = Depends(get_current_user),
    service: CountryService = Depends(get_country_service),
) -> CountryResponse:
    """Return the caller's country with resources brought up to date."""

    try:
        country = service.get_country(current_user.id)
    except CountryNotFoundError as exc:
        raise _country_not_found() from exc
    return CountryResponse.from_state(country)


@router.get("/production", response_model=ProductionRates)
def read_production(
    current_user: UserSchema = Depends(get_current_user),
    service: CountryService = Depends(get_country_service),
) -> ProductionRates:
    """Return the caller's net hourly production."""

    try:
        return service.get_production(current_user.id)
    except CountryNotFoundError as exc:
        raise _country_not_found() from exc


@router.patch("/{country_id}", response_model=CountryResponse)
def update_country(
    country_id: UUID,
    payload: dict[str, Any] = Body(...),
    current_user: UserSchema = Depends(get_current_user),
    service: CountryService = Depends(get_country_service),
) -> CountryResponse:
    """Apply an edit to the caller's country; only the flag may change."""

    if not set(payload) <= UPDATABLE_FIELDS:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid updates"
        )
    try:
        update = FlagUpdateRequest.model_validate(payload)
    except ValidationError as exc:
        raise RequestValidationError(exc.errors()) from exc

    try:
        country = service.update_flag(current_user.id, country_id, update.flag)
    except CountryNotFoundError as exc:
        raise _country_not_found() from exc
    return CountryResponse.from_state(country)


@router.delete("/{country_id}", response_model=MessageResponse)
def delete_country(
    country_id: UUID,
    current_user: UserSchema = Depends(get_current_user),
    service: CountryService = Depends(get_country_service),
) -> MessageResponse:
    """Delete the caller's country and clear their country flag."""

    try:
        service.delete_country(current_user.id, country_id)
    except CountryNotFoundError as exc:
        raise _country_not_found() from exc

    current_user.has_country = False
    return MessageResponse(message="Country deleted")
