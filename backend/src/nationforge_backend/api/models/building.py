"""Pydantic models for building catalog and construction endpoints."""

# ruff: noqa: TC001

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from nationforge_backend.game_logic.state import (
    ConstructionOrder,
    CountryState,
    OwnedBuilding,
)
from nationforge_backend.shared import ResourceState

_API_MODEL_CONFIG = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ConstructionRequest(BaseModel):
    """Client request to start building a structure."""

    model_config = _API_MODEL_CONFIG

    building_type: str = Field(min_length=1, max_length=64)


class BuildingStatusResponse(BaseModel):
    """Owned buildings together with the pending construction queue."""

    model_config = _API_MODEL_CONFIG

    buildings: list[OwnedBuilding]
    construction_queue: list[ConstructionOrder]

    @classmethod
    def from_state(cls, country: CountryState) -> BuildingStatusResponse:
        return cls(
            buildings=list(country.buildings),
            construction_queue=list(country.construction_queue),
        )


class ConstructionResponse(BuildingStatusResponse):
    """Status returned after a construction order was accepted."""

    resources: ResourceState

    @classmethod
    def from_state(cls, country: CountryState) -> ConstructionResponse:
        return cls(
            buildings=list(country.buildings),
            construction_queue=list(country.construction_queue),
            resources=country.resources,
        )


__all__ = [
    "BuildingStatusResponse",
    "ConstructionRequest",
    "ConstructionResponse",
]
