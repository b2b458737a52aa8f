"""Immutable value objects shared across the domain layer."""

from __future__ import annotations

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel
from pydantic.config import ConfigDict

from nationforge_backend.shared.enums import FlagPattern

DOMAIN_MODEL_CONFIG = ConfigDict(
    frozen=True, alias_generator=to_camel, populate_by_name=True
)

ENVIRONMENT_MIN = 0
ENVIRONMENT_MAX = 100

_COLOR_PATTERN = r"^#[0-9A-Fa-f]{6}$"


class ProductionRates(BaseModel):
    """Signed per-hour change for every tracked resource."""

    model_config = DOMAIN_MODEL_CONFIG

    population: int = 0
    economy: int = 0
    environment: int = 0

    def add(self, other: ProductionRates, *, times: int = 1) -> ProductionRates:
        """Return the sum of these rates and *other* scaled by *times*."""
        return ProductionRates(
            population=self.population + other.population * times,
            economy=self.economy + other.economy * times,
            environment=self.environment + other.environment * times,
        )


class ResourceState(BaseModel):
    """Resource totals held by a country."""

    model_config = DOMAIN_MODEL_CONFIG

    population: int = Field(..., ge=0)
    economy: int = Field(..., ge=0)
    environment: int = Field(..., ge=ENVIRONMENT_MIN, le=ENVIRONMENT_MAX)

    def spend_economy(self, amount: int) -> ResourceState:
        """Return a copy with *amount* economy deducted."""
        if amount < 0:
            msg = "Spent amount must be non-negative."
            raise ValueError(msg)
        if amount > self.economy:
            msg = f"Cannot spend {amount} economy with only {self.economy} available."
            raise ValueError(msg)
        return self.model_copy(update={"economy": self.economy - amount})


class FlagDesign(BaseModel):
    """Opaque flag descriptor rendered by the client."""

    model_config = DOMAIN_MODEL_CONFIG

    background_color: str = Field(..., pattern=_COLOR_PATTERN)
    pattern: FlagPattern
    pattern_color: str = Field(..., pattern=_COLOR_PATTERN)


__all__ = [
    "DOMAIN_MODEL_CONFIG",
    "ENVIRONMENT_MAX",
    "ENVIRONMENT_MIN",
    "FlagDesign",
    "ProductionRates",
    "ResourceState",
]
