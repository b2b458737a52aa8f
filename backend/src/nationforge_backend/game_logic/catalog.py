"""Static building definitions available for construction."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from functools import cache
from types import MappingProxyType

from pydantic import BaseModel, Field, PositiveInt

from nationforge_backend.shared.value_objects import (
    DOMAIN_MODEL_CONFIG,
    ProductionRates,
)


class BuildingCost(BaseModel):
    """One-time price paid when construction starts."""

    model_config = DOMAIN_MODEL_CONFIG

    economy: int = Field(..., ge=0)


class BuildingRequirements(BaseModel):
    """Minimum resource levels needed before a building becomes available."""

    model_config = DOMAIN_MODEL_CONFIG

    population: int = Field(default=0, ge=0)
    economy: int = Field(default=0, ge=0)


class BuildingDefinition(BaseModel):
    """Catalog entry describing a kind of structure."""

    model_config = DOMAIN_MODEL_CONFIG

    name: str = Field(..., min_length=1)
    description: str
    cost: BuildingCost
    effects: ProductionRates = Field(default_factory=ProductionRates)
    build_time: PositiveInt = Field(..., description="Construction time in hours.")
    requirements: BuildingRequirements = Field(default_factory=BuildingRequirements)


class BuildingCatalog:
    """Read-only mapping from building type key to its definition."""

    def __init__(self, definitions: Mapping[str, BuildingDefinition]) -> None:
        self._definitions: Mapping[str, BuildingDefinition] = MappingProxyType(
            dict(definitions)
        )

    def lookup(self, type_key: str) -> BuildingDefinition | None:
        """Return the definition registered for *type_key*, if any."""
        return self._definitions.get(type_key)

    def list_all(self) -> Mapping[str, BuildingDefinition]:
        """Return every definition keyed by building type."""
        return self._definitions

    def __contains__(self, type_key: object) -> bool:
        return type_key in self._definitions

    def __iter__(self) -> Iterator[str]:
        return iter(self._definitions)

    def __len__(self) -> int:
        return len(self._definitions)


DEFAULT_BUILDING_DEFINITIONS: Mapping[str, BuildingDefinition] = MappingProxyType(
    {
        "HOUSE": BuildingDefinition(
            name="House",
            description="Basic housing for your citizens",
            cost=BuildingCost(economy=1000),
            effects=ProductionRates(population=100, economy=5, environment=-2),
            build_time=1,
            requirements=BuildingRequirements(population=0, economy=1000),
        ),
        "FACTORY": BuildingDefinition(
            name="Factory",
            description="Industrial facility that boosts economy",
            cost=BuildingCost(economy=5000),
            effects=ProductionRates(population=-10, economy=50, environment=-10),
            build_time=2,
            requirements=BuildingRequirements(population=1000, economy=5000),
        ),
        "PARK": BuildingDefinition(
            name="Park",
            description="Recreational area that improves environment",
            cost=BuildingCost(economy=2000),
            effects=ProductionRates(population=20, economy=-5, environment=15),
            build_time=1,
            requirements=BuildingRequirements(population=500, economy=2000),
        ),
        "OFFICE": BuildingDefinition(
            name="Office Complex",
            description="Modern workplace that balances economy and environment",
            cost=BuildingCost(economy=3000),
            effects=ProductionRates(population=30, economy=30, environment=-5),
            build_time=2,
            requirements=BuildingRequirements(population=800, economy=3000),
        ),
        "SOLAR_PLANT": BuildingDefinition(
            name="Solar Power Plant",
            description="Clean energy facility that greatly benefits the environment",
            cost=BuildingCost(economy=8000),
            effects=ProductionRates(population=0, economy=20, environment=25),
            build_time=3,
            requirements=BuildingRequirements(population=2000, economy=8000),
        ),
    }
)


@cache
def get_default_catalog() -> BuildingCatalog:
    """Return the cached catalog of built-in building types."""
    return BuildingCatalog(DEFAULT_BUILDING_DEFINITIONS)


__all__ = [
    "DEFAULT_BUILDING_DEFINITIONS",
    "BuildingCatalog",
    "BuildingCost",
    "BuildingDefinition",
    "BuildingRequirements",
    "get_default_catalog",
]
