"""Repository helpers for working with country aggregates."""

from __future__ import annotations

import logging
from collections.abc import Callable  # noqa: TC003
from datetime import UTC, datetime
from typing import TypeVar
from uuid import UUID  # noqa: TC003

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session  # noqa: TC002

from nationforge_backend.database.schemas import CountrySchema
from nationforge_backend.game_logic.persistence import (
    CountryStoreError,
    DuplicateCountryError,
)
from nationforge_backend.game_logic.state import (
    ConstructionOrder,
    CountryState,
    OwnedBuilding,
)
from nationforge_backend.shared import FlagDesign, NationalValue, ResourceState

logger = logging.getLogger(__name__)

_T = TypeVar("_T")


class CountryRepository:
    """SQLAlchemy-backed implementation of the country store protocol.

    Rows read through the repository stay referenced for its lifetime, so a
    later :meth:`save` updates the row as it was read and the
    ``version_id`` check rejects writes made stale by another transaction.
    """

    def __init__(self, session: Session) -> None:
        self._session = session
        self._loaded: dict[UUID, CountrySchema] = {}

    def get(self, country_id: UUID) -> CountryState | None:
        """Return the country with the given ID."""
        row = self._run(lambda: self._session.get(CountrySchema, country_id))
        return self._track(row)

    def get_by_owner(self, owner_id: UUID) -> CountryState | None:
        """Return the country owned by the given user."""
        stmt = select(CountrySchema).where(CountrySchema.owner_id == owner_id)
        row = self._run(lambda: self._session.scalar(stmt))
        return self._track(row)

    def get_by_name(self, name: str) -> CountryState | None:
        """Return the country with the given name."""
        stmt = select(CountrySchema).where(CountrySchema.name == name)
        row = self._run(lambda: self._session.scalar(stmt))
        return self._track(row)

    def add(self, country: CountryState) -> CountryState:
        """Insert a new country row."""
        row = CountrySchema(id=country.id, owner_id=country.owner_id)
        _apply_state(row, country)

        def _insert() -> None:
            self._session.add(row)
            self._session.flush()

        self._run(_insert)
        self._loaded[row.id] = row
        return country

    def save(self, country: CountryState) -> CountryState:
        """Write the whole aggregate back onto its row."""
        row = self._loaded.get(country.id)
        if row is None:
            row = self._run(lambda: self._session.get(CountrySchema, country.id))
        if row is None:
            msg = f"Country {country.id} is not stored."
            raise CountryStoreError(msg)
        _apply_state(row, country)
        self._run(self._session.flush)
        return country

    def delete(self, country_id: UUID) -> None:
        """Remove the country row if it exists."""
        row = self._loaded.get(country_id)
        if row is None:
            row = self._run(lambda: self._session.get(CountrySchema, country_id))
        if row is None:
            return

        def _remove() -> None:
            self._session.delete(row)
            self._session.flush()

        self._run(_remove)
        self._loaded.pop(country_id, None)

    def _track(self, row: CountrySchema | None) -> CountryState | None:
        if row is None:
            return None
        self._loaded[row.id] = row
        return _to_state(row)

    def _run(self, operation: Callable[[], _T]) -> _T:
        """Execute *operation*, translating SQLAlchemy failures into store errors."""
        try:
            return operation()
        except IntegrityError as exc:
            logger.warning("Country write violated a uniqueness constraint: %s", exc)
            raise DuplicateCountryError(str(exc.orig)) from exc
        except SQLAlchemyError as exc:
            logger.exception("Country storage operation failed")
            msg = "Country storage operation failed."
            raise CountryStoreError(msg) from exc


def _apply_state(row: CountrySchema, country: CountryState) -> None:
    row.name = country.name
    row.government = country.government
    row.national_values = [value.value for value in country.national_values]
    row.flag = country.flag.model_dump(mode="json", by_alias=True)
    row.population = country.resources.population
    row.economy = country.resources.economy
    row.environment = country.resources.environment
    row.buildings = [
        building.model_dump(mode="json", by_alias=True)
        for building in country.buildings
    ]
    row.construction_queue = [
        order.model_dump(mode="json", by_alias=True)
        for order in country.construction_queue
    ]
    row.last_resource_update = country.last_resource_update


def _to_state(row: CountrySchema) -> CountryState:
    return CountryState(
        id=row.id,
        owner_id=row.owner_id,
        name=row.name,
        government=row.government,
        national_values=tuple(NationalValue(value) for value in row.national_values),
        flag=FlagDesign.model_validate(row.flag),
        resources=ResourceState(
            population=row.population,
            economy=row.economy,
            environment=row.environment,
        ),
        buildings=tuple(OwnedBuilding.model_validate(item) for item in row.buildings),
        construction_queue=tuple(
            ConstructionOrder.model_validate(item) for item in row.construction_queue
        ),
        last_resource_update=_as_utc(row.last_resource_update),
    )


def _as_utc(moment: datetime) -> datetime:
    """Attach UTC to timestamps returned naive by backends without tz support."""
    if moment.tzinfo is None:
        return moment.replace(tzinfo=UTC)
    return moment.astimezone(UTC)


__all__ = ["CountryRepository"]
