"""Admission checks and queueing for new construction orders."""

from __future__ import annotations

import logging
from datetime import datetime, timedelta
from enum import StrEnum

from pydantic import BaseModel
from pydantic.config import ConfigDict

from nationforge_backend.game_logic.advancement import (
    ResourceAdvancementEngine,  # noqa: TC001
)
from nationforge_backend.game_logic.state import (  # noqa: TC001
    ConstructionOrder,
    CountryState,
)

logger = logging.getLogger(__name__)


class RejectionReason(StrEnum):
    """Reasons a construction order can be turned down."""

    INVALID_BUILDING_TYPE = "invalid_building_type"
    INSUFFICIENT_POPULATION = "insufficient_population"
    INSUFFICIENT_ECONOMY = "insufficient_economy"
    CANNOT_AFFORD = "cannot_afford"

    @property
    def message(self) -> str:
        """Return the player-facing description of the rejection."""
        return REJECTION_MESSAGES[self]


REJECTION_MESSAGES: dict[RejectionReason, str] = {
    RejectionReason.INVALID_BUILDING_TYPE: "Invalid building type",
    RejectionReason.INSUFFICIENT_POPULATION: "Insufficient population",
    RejectionReason.INSUFFICIENT_ECONOMY: "Insufficient economy",
    RejectionReason.CANNOT_AFFORD: "Cannot afford building",
}


class ConstructionOutcome(BaseModel):
    """Result of a construction attempt.

    ``country`` is the latest state of the nation, already advanced when the
    building type was valid, and ``None`` only when no country was consulted.
    ``advanced`` tells callers whether the state differs from what they loaded
    even if the order itself was rejected.
    """

    model_config = ConfigDict(frozen=True)

    country: CountryState | None
    advanced: bool = False
    order: ConstructionOrder | None = None
    rejection: RejectionReason | None = None

    @property
    def accepted(self) -> bool:
        return self.rejection is None

    @property
    def changed(self) -> bool:
        """Return whether the country must be persisted."""
        return self.advanced or self.order is not None


class ConstructionAdmissionController:
    """Validate construction requests and enqueue accepted orders."""

    def __init__(self, engine: ResourceAdvancementEngine) -> None:
        self._engine = engine

    def construct(
        self, country: CountryState, building_type: str, now: datetime
    ) -> ConstructionOutcome:
        """Attempt to start building *building_type* for *country* at *now*."""
        definition = self._engine.catalog.lookup(building_type)
        if definition is None:
            return ConstructionOutcome(
                country=country, rejection=RejectionReason.INVALID_BUILDING_TYPE
            )

        advancement = self._engine.advance(country, now)
        current = advancement.country
        resources = current.resources

        rejection: RejectionReason | None = None
        if resources.population < definition.requirements.population:
            rejection = RejectionReason.INSUFFICIENT_POPULATION
        elif resources.economy < definition.requirements.economy:
            rejection = RejectionReason.INSUFFICIENT_ECONOMY
        elif resources.economy < definition.cost.economy:
            rejection = RejectionReason.CANNOT_AFFORD

        if rejection is not None:
            logger.info(
                "Rejected %s construction for country %s: %s",
                building_type,
                current.id,
                rejection.value,
            )
            return ConstructionOutcome(
                country=current, advanced=advancement.advanced, rejection=rejection
            )

        order = ConstructionOrder(
            building_type=building_type,
            started_at=now,
            completes_at=now + timedelta(hours=definition.build_time),
        )
        updated = current.with_resources(
            resources.spend_economy(definition.cost.economy)
        ).enqueue(order)
        logger.info(
            "Queued %s construction for country %s, completes at %s",
            building_type,
            current.id,
            order.completes_at.isoformat(),
        )
        return ConstructionOutcome(
            country=updated, advanced=advancement.advanced, order=order
        )


__all__ = [
    "REJECTION_MESSAGES",
    "ConstructionAdmissionController",
    "ConstructionOutcome",
    "RejectionReason",
]
