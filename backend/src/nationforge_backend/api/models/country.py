"""Pydantic models for country and construction endpoints."""

# ruff: noqa: TC001

from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from nationforge_backend.game_logic.state import (
    MAX_NATIONAL_VALUES,
    ConstructionOrder,
    CountryState,
    OwnedBuilding,
)
from nationforge_backend.shared import (
    FlagDesign,
    GovernmentType,
    NationalValue,
    ResourceState,
)

_API_MODEL_CONFIG = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CountryCreateRequest(BaseModel):
    """Payload for founding a new country."""

    model_config = _API_MODEL_CONFIG

    name: str = Field(min_length=1, max_length=64)
    government: GovernmentType
    values: list[NationalValue] = Field(min_length=1, max_length=MAX_NATIONAL_VALUES)
    flag: FlagDesign

    @field_validator("name")
    @classmethod
    def validate_name(cls, value: str) -> str:
        stripped = value.strip()
        if not stripped:
            msg = "name must not be empty"
            raise ValueError(msg)
        return stripped

    @field_validator("values")
    @classmethod
    def validate_values(cls, value: list[NationalValue]) -> list[NationalValue]:
        if len(value) != len(set(value)):
            msg = "values must not repeat"
            raise ValueError(msg)
        return value


class FlagUpdateRequest(BaseModel):
    """Payload for editing a country's flag."""

    model_config = _API_MODEL_CONFIG

    flag: FlagDesign


class CountryResponse(BaseModel):
    """Public representation of a country aggregate."""

    model_config = _API_MODEL_CONFIG

    id_: UUID = Field(alias="id")
    owner_id: UUID
    name: str
    government: GovernmentType
    values: list[NationalValue]
    flag: FlagDesign
    resources: ResourceState
    buildings: list[OwnedBuilding]
    construction_queue: list[ConstructionOrder]
    last_resource_update: datetime

    @classmethod
    def from_state(cls, country: CountryState) -> CountryResponse:
        """Build a response model from a domain state."""
        return cls(
            id_=country.id,
            owner_id=country.owner_id,
            name=country.name,
            government=country.government,
            values=list(country.national_values),
            flag=country.flag,
            resources=country.resources,
            buildings=list(country.buildings),
            construction_queue=list(country.construction_queue),
            last_resource_update=country.last_resource_update,
        )


class MessageResponse(BaseModel):
    """Plain acknowledgement message."""

    message: str


__all__ = [
    "CountryCreateRequest",
    "CountryResponse",
    "FlagUpdateRequest",
    "MessageResponse",
]
