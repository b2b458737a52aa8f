"""Gameplay configuration objects for resource growth and advancement."""

from __future__ import annotations

from functools import cache

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict
from pydantic_settings import BaseSettings, SettingsConfigDict

from nationforge_backend.shared.value_objects import (
    ENVIRONMENT_MAX,
    ENVIRONMENT_MIN,
    ProductionRates,
    ResourceState,
)


class GameDefaults(BaseSettings):
    """Load default gameplay parameters from the environment."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="NATIONFORGE_GAME_",
        extra="ignore",
    )

    starting_population: int = Field(default=1000, ge=0)
    starting_economy: int = Field(default=10_000, ge=0)
    starting_environment: int = Field(
        default=ENVIRONMENT_MAX, ge=ENVIRONMENT_MIN, le=ENVIRONMENT_MAX
    )
    base_population_growth: int = 10
    base_economy_growth: int = 100
    base_environment_change: int = 0
    advancement_threshold_hours: float = Field(default=0.1, ge=0)

    def to_config(self) -> GameConfiguration:
        """Convert defaults into an immutable configuration object."""
        return GameConfiguration(
            starting_resources=ResourceState(
                population=self.starting_population,
                economy=self.starting_economy,
                environment=self.starting_environment,
            ),
            base_production=ProductionRates(
                population=self.base_population_growth,
                economy=self.base_economy_growth,
                environment=self.base_environment_change,
            ),
            advancement_threshold_hours=self.advancement_threshold_hours,
        )


class GameConfiguration(BaseModel):
    """Immutable representation of the growth rules applied to every country."""

    model_config = ConfigDict(frozen=True)

    starting_resources: ResourceState = Field(
        default_factory=lambda: ResourceState(
            population=1000, economy=10_000, environment=ENVIRONMENT_MAX
        )
    )
    base_production: ProductionRates = Field(
        default_factory=lambda: ProductionRates(
            population=10, economy=100, environment=0
        )
    )
    advancement_threshold_hours: float = Field(default=0.1, ge=0)


@cache
def get_default_game_configuration() -> GameConfiguration:
    """Return the cached default gameplay configuration."""
    return GameDefaults().to_config()


__all__ = [
    "GameConfiguration",
    "GameDefaults",
    "get_default_game_configuration",
]
