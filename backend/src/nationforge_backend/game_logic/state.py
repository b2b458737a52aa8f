"""Country-centric state containers used by the game logic layer."""

from __future__ import annotations

from datetime import datetime  # noqa: TC003
from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from pydantic import AwareDatetime, BaseModel, Field, PositiveInt, model_validator

from nationforge_backend.shared.enums import GovernmentType, NationalValue
from nationforge_backend.shared.value_objects import (
    DOMAIN_MODEL_CONFIG,
    FlagDesign,
    ResourceState,
)

if TYPE_CHECKING:
    from collections.abc import Iterable

MAX_NATIONAL_VALUES = 3


class OwnedBuilding(BaseModel):
    """Completed buildings of a single type owned by a country."""

    model_config = DOMAIN_MODEL_CONFIG

    type: str = Field(..., min_length=1)
    count: PositiveInt = 1

    def increment(self) -> OwnedBuilding:
        """Return a copy holding one more building."""
        return self.model_copy(update={"count": self.count + 1})


class ConstructionOrder(BaseModel):
    """A queued promise to add one building once ``completes_at`` is reached."""

    model_config = DOMAIN_MODEL_CONFIG

    building_type: str = Field(..., min_length=1)
    started_at: AwareDatetime
    completes_at: AwareDatetime

    @model_validator(mode="after")
    def _validate_timing(self) -> ConstructionOrder:
        """Ensure the order does not complete before it starts."""
        if self.completes_at < self.started_at:
            msg = "Construction cannot complete before it starts."
            raise ValueError(msg)
        return self

    def is_complete(self, now: datetime) -> bool:
        """Return whether the order has finished at *now* (inclusive)."""
        return self.completes_at <= now


class CountryState(BaseModel):
    """Aggregate root capturing all mutable attributes of a player's nation."""

    model_config = DOMAIN_MODEL_CONFIG

    id: UUID
    owner_id: UUID
    name: str = Field(..., min_length=1, max_length=64)
    government: GovernmentType
    national_values: tuple[NationalValue, ...] = Field(
        ..., alias="values", min_length=1, max_length=MAX_NATIONAL_VALUES
    )
    flag: FlagDesign
    resources: ResourceState
    buildings: tuple[OwnedBuilding, ...] = Field(default_factory=tuple)
    construction_queue: tuple[ConstructionOrder, ...] = Field(default_factory=tuple)
    last_resource_update: AwareDatetime

    @model_validator(mode="after")
    def _validate_collections(self) -> CountryState:
        """Ensure building entries are merged by type and values are distinct."""
        types = [building.type for building in self.buildings]
        if len(types) != len(set(types)):
            msg = "Owned buildings must not contain duplicate type entries."
            raise ValueError(msg)
        if len(self.national_values) != len(set(self.national_values)):
            msg = "National values must not repeat."
            raise ValueError(msg)
        return self

    def building_count(self, building_type: str) -> int:
        """Return how many completed buildings of *building_type* are owned."""
        for building in self.buildings:
            if building.type == building_type:
                return building.count
        return 0

    def with_resources(self, resources: ResourceState) -> CountryState:
        """Return a state with resources replaced by *resources*."""
        return self.model_copy(update={"resources": resources})

    def with_flag(self, flag: FlagDesign) -> CountryState:
        """Return a state with the flag replaced by *flag*."""
        return self.model_copy(update={"flag": flag})

    def enqueue(self, order: ConstructionOrder) -> CountryState:
        """Return a state with *order* appended to the construction queue."""
        return self.model_copy(
            update={"construction_queue": (*self.construction_queue, order)}
        )

    def with_completed(self, orders: Iterable[ConstructionOrder]) -> CountryState:
        """Return a state where each of *orders* adds one owned building."""
        buildings = list(self.buildings)
        for order in orders:
            for index, building in enumerate(buildings):
                if building.type == order.building_type:
                    buildings[index] = building.increment()
                    break
            else:
                buildings.append(OwnedBuilding(type=order.building_type, count=1))
        return self.model_copy(update={"buildings": tuple(buildings)})


__all__ = [
    "MAX_NATIONAL_VALUES",
    "ConstructionOrder",
    "CountryState",
    "OwnedBuilding",
]
