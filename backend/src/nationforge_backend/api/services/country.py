"""Country lifecycle service exposed to the API layer.

Every entry point that reads or changes a country first brings it up to date
with :class:`ResourceAdvancementEngine` and persists the advanced aggregate,
so resources and completed construction reflect wall-clock time without a
background scheduler.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from uuid import uuid4

from nationforge_backend.game_logic import (
    ConstructionAdmissionController,
    ConstructionOutcome,
    CountryState,
    DuplicateCountryError,
    ResourceAdvancementEngine,
    RejectionReason,
    compute_hourly_production,
)

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping
    from uuid import UUID

    from nationforge_backend.game_logic import (
        BuildingCatalog,
        BuildingDefinition,
        CountryStore,
        GameConfiguration,
    )
    from nationforge_backend.shared import (
        Clock,
        FlagDesign,
        GovernmentType,
        NationalValue,
        ProductionRates,
    )

logger = logging.getLogger(__name__)


class CountryNotFoundError(Exception):
    """Raised when no country matches the caller and identifier."""


class CountryAlreadyExistsError(Exception):
    """Raised when a user who already owns a country tries to found another."""


class CountryNameTakenError(Exception):
    """Raised when the requested country name is used by another nation."""


class CountryService:
    """Coordinate country storage with the advancement and construction rules."""

    def __init__(
        self,
        *,
        store: CountryStore,
        catalog: BuildingCatalog,
        configuration: GameConfiguration,
        clock: Clock,
    ) -> None:
        self._store = store
        self._catalog = catalog
        self._configuration = configuration
        self._clock = clock
        self._engine = ResourceAdvancementEngine(catalog, configuration)
        self._controller = ConstructionAdmissionController(self._engine)

    def create_country(
        self,
        *,
        owner_id: UUID,
        name: str,
        government: GovernmentType,
        values: Iterable[NationalValue],
        flag: FlagDesign,
    ) -> CountryState:
        """Found a new country for *owner_id* seeded with default resources."""
        if self._store.get_by_owner(owner_id) is not None:
            raise CountryAlreadyExistsError(str(owner_id))
        if self._store.get_by_name(name) is not None:
            raise CountryNameTakenError(name)

        country = CountryState(
            id=uuid4(),
            owner_id=owner_id,
            name=name,
            government=government,
            national_values=tuple(values),
            flag=flag,
            resources=self._configuration.starting_resources,
            last_resource_update=self._clock.now(),
        )
        try:
            country = self._store.add(country)
        except DuplicateCountryError as exc:
            raise CountryNameTakenError(name) from exc
        logger.info("Founded country %s (%s) for user %s", country.id, name, owner_id)
        return country

    def get_country(self, owner_id: UUID) -> CountryState:
        """Return the caller's country, advanced to the current time."""
        return self._load_current(owner_id)

    def get_production(self, owner_id: UUID) -> ProductionRates:
        """Return the hourly production of the caller's country."""
        country = self._load_current(owner_id)
        return compute_hourly_production(country, self._catalog, self._configuration)

    def get_building_status(self, owner_id: UUID) -> CountryState:
        """Return the caller's country with completed construction promoted."""
        return self._load_current(owner_id)

    def list_building_types(self) -> Mapping[str, BuildingDefinition]:
        """Return every building type that can be constructed."""
        return self._catalog.list_all()

    def construct(self, owner_id: UUID, building_type: str) -> ConstructionOutcome:
        """Attempt to queue construction of *building_type* for the caller.

        Unknown building types are turned down before the country is loaded.
        The advanced state is persisted even when the order is rejected.
        """
        if self._catalog.lookup(building_type) is None:
            logger.info("Rejected unknown building type %r", building_type)
            return ConstructionOutcome(
                country=None, rejection=RejectionReason.INVALID_BUILDING_TYPE
            )

        country = self._require_owned(owner_id)
        outcome = self._controller.construct(country, building_type, self._clock.now())
        if outcome.changed and outcome.country is not None:
            self._store.save(outcome.country)
        return outcome

    def update_flag(
        self, owner_id: UUID, country_id: UUID, flag: FlagDesign
    ) -> CountryState:
        """Replace the flag of the caller's country *country_id*."""
        country = self._require_by_id(owner_id, country_id)
        advancement = self._engine.advance(country, self._clock.now())
        updated = self._store.save(advancement.country.with_flag(flag))
        logger.info("Updated flag of country %s", country_id)
        return updated

    def delete_country(self, owner_id: UUID, country_id: UUID) -> CountryState:
        """Delete the caller's country *country_id* and return its last state."""
        country = self._require_by_id(owner_id, country_id)
        self._store.delete(country.id)
        logger.info("Deleted country %s of user %s", country_id, owner_id)
        return country

    def _load_current(self, owner_id: UUID) -> CountryState:
        country = self._require_owned(owner_id)
        advancement = self._engine.advance(country, self._clock.now())
        if not advancement.advanced:
            return country
        logger.info(
            "Advanced country %s by %.2f hours, completed %d buildings",
            country.id,
            advancement.hours_passed,
            len(advancement.completed_orders),
        )
        return self._store.save(advancement.country)

    def _require_owned(self, owner_id: UUID) -> CountryState:
        country = self._store.get_by_owner(owner_id)
        if country is None:
            raise CountryNotFoundError(str(owner_id))
        return country

    def _require_by_id(self, owner_id: UUID, country_id: UUID) -> CountryState:
        country = self._store.get(country_id)
        if country is None or country.owner_id != owner_id:
            raise CountryNotFoundError(str(country_id))
        return country


__all__ = [
    "CountryAlreadyExistsError",
    "CountryNameTakenError",
    "CountryNotFoundError",
    "CountryService",
]
