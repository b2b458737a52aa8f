"""Building catalog and construction endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import JSONResponse

from nationforge_backend.api.dependencies import get_country_service, get_current_user
from nationforge_backend.api.models import (
    BuildingStatusResponse,
    ConstructionRequest,
    ConstructionResponse,
)
from nationforge_backend.api.services import CountryNotFoundError, CountryService
from nationforge_backend.database import UserSchema
from nationforge_backend.game_logic import BuildingDefinition

router = APIRouter(prefix="/buildings", tags=["buildings"])


@router.get("/types", response_model=dict[str, BuildingDefinition])
def list_building_types(
    current_user: UserSchema = Depends(get_current_user),
    service: CountryService = Depends(get_country_service),
) -> dict[str, BuildingDefinition]:
    """Return every building that can be constructed."""

    return dict(service.list_building_types())


@router.get("/status", response_model=BuildingStatusResponse)
def read_building_status(
    current_user: UserSchema = Depends(get_current_user),
    service: CountryService = Depends(get_country_service),
) -> BuildingStatusResponse:
    """Return owned buildings and pending construction for the caller."""

    try:
        country = service.get_building_status(current_user.id)
    except CountryNotFoundError as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Country not found"
        ) from exc
    return BuildingStatusResponse.from_state(country)


@router.post(
    "/construct",
    response_model=ConstructionResponse,
    responses={status.HTTP_400_BAD_REQUEST: {"description": "Construction rejected"}},
)
def construct_building(
    payload: ConstructionRequest,
    current_user: UserSchema = Depends(get_current_user),
    service: CountryService = Depends(get_country_service),
) -> ConstructionResponse | JSONResponse:
    """Queue construction of a building for the caller's country.

    Rejections are returned as a response rather than raised so the advanced
    resources of the country are still committed with the request.
    """

    try:
        outcome = service.construct(current_user.id, payload.building_type)
    except CountryNotFoundError as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Country not found"
        ) from exc

    if outcome.rejection is not None:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"detail": outcome.rejection.message},
        )
    return ConstructionResponse.from_state(outcome.country)
