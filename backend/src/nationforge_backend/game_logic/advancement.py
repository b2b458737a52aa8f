"""Lazy, time-driven reconciliation of country resources and construction."""

from __future__ import annotations

import logging
import math
from datetime import datetime  # noqa: TC003

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

from nationforge_backend.game_logic.catalog import BuildingCatalog  # noqa: TC001
from nationforge_backend.game_logic.configuration import (  # noqa: TC001
    GameConfiguration,
)
from nationforge_backend.game_logic.production import compute_hourly_production
from nationforge_backend.game_logic.state import (  # noqa: TC001
    ConstructionOrder,
    CountryState,
)
from nationforge_backend.shared.value_objects import (
    ENVIRONMENT_MAX,
    ENVIRONMENT_MIN,
    ProductionRates,
    ResourceState,
)

logger = logging.getLogger(__name__)

SECONDS_PER_HOUR = 3600


class AdvancementResult(BaseModel):
    """Outcome of bringing a country up to date with the wall clock."""

    model_config = ConfigDict(frozen=True)

    country: CountryState
    advanced: bool
    hours_passed: float
    production: ProductionRates | None = None
    completed_orders: tuple[ConstructionOrder, ...] = Field(default_factory=tuple)


class ResourceAdvancementEngine:
    """Apply elapsed-time production and promote finished construction."""

    def __init__(
        self, catalog: BuildingCatalog, configuration: GameConfiguration
    ) -> None:
        self._catalog = catalog
        self._configuration = configuration

    @property
    def catalog(self) -> BuildingCatalog:
        return self._catalog

    @property
    def configuration(self) -> GameConfiguration:
        return self._configuration

    def advance(self, country: CountryState, now: datetime) -> AdvancementResult:
        """Return *country* reconciled up to *now*.

        Nothing changes while less than the configured threshold has elapsed
        since ``last_resource_update``; that time stays owed to the next call.
        Production is computed from the buildings owned before this call's
        completed orders are promoted.
        """
        elapsed = now - country.last_resource_update
        hours_passed = elapsed.total_seconds() / SECONDS_PER_HOUR
        if hours_passed < self._configuration.advancement_threshold_hours:
            return AdvancementResult(
                country=country, advanced=False, hours_passed=hours_passed
            )

        production = compute_hourly_production(
            country, self._catalog, self._configuration
        )
        resources = country.resources
        environment = resources.environment + math.floor(
            production.environment * hours_passed
        )
        updated_resources = ResourceState(
            population=max(
                0,
                resources.population + math.floor(production.population * hours_passed),
            ),
            economy=max(
                0, resources.economy + math.floor(production.economy * hours_passed)
            ),
            environment=max(ENVIRONMENT_MIN, min(ENVIRONMENT_MAX, environment)),
        )

        completed = tuple(
            order for order in country.construction_queue if order.is_complete(now)
        )
        remaining = tuple(
            order for order in country.construction_queue if not order.is_complete(now)
        )
        updated = (
            country.with_resources(updated_resources)
            .model_copy(
                update={"construction_queue": remaining, "last_resource_update": now}
            )
            .with_completed(completed)
        )

        logger.debug(
            "Advanced country %s by %.3f hours, promoted %d construction orders",
            country.id,
            hours_passed,
            len(completed),
        )
        return AdvancementResult(
            country=updated,
            advanced=True,
            hours_passed=hours_passed,
            production=production,
            completed_orders=completed,
        )


__all__ = ["SECONDS_PER_HOUR", "AdvancementResult", "ResourceAdvancementEngine"]
