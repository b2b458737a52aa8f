"""Persistence abstractions for country aggregates.

The game logic layer stores each country as a single document keyed by its
identifier. The API layer can provide concrete adapters (in-memory,
database-backed, etc.) that comply with :class:`CountryStore`; every adapter
must write the whole aggregate in one atomic operation and enforce that names
and owners are unique.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from uuid import UUID

    from nationforge_backend.game_logic.state import CountryState


class CountryStoreError(Exception):
    """Raised when the underlying storage fails to read or write a country."""


class DuplicateCountryError(CountryStoreError):
    """Raised when a write would violate the name or owner uniqueness rules."""


class CountryStore(Protocol):
    """Protocol describing how country aggregates are persisted."""

    def get(self, country_id: UUID) -> CountryState | None:
        """Return the country stored under *country_id* or ``None``."""

    def get_by_owner(self, owner_id: UUID) -> CountryState | None:
        """Return the country owned by *owner_id* or ``None``."""

    def get_by_name(self, name: str) -> CountryState | None:
        """Return the country named *name* or ``None``."""

    def add(self, country: CountryState) -> CountryState:
        """Persist a new *country*."""

    def save(self, country: CountryState) -> CountryState:
        """Replace the stored aggregate with *country*."""

    def delete(self, country_id: UUID) -> None:
        """Remove the country stored under *country_id*."""


class InMemoryCountryStore:
    """Trivial in-memory implementation of :class:`CountryStore`."""

    def __init__(self) -> None:
        self._countries: dict[UUID, CountryState] = {}

    def get(self, country_id: UUID) -> CountryState | None:
        return self._countries.get(country_id)

    def get_by_owner(self, owner_id: UUID) -> CountryState | None:
        return next(
            (
                country
                for country in self._countries.values()
                if country.owner_id == owner_id
            ),
            None,
        )

    def get_by_name(self, name: str) -> CountryState | None:
        return next(
            (country for country in self._countries.values() if country.name == name),
            None,
        )

    def add(self, country: CountryState) -> CountryState:
        """Store *country*, rejecting duplicate identifiers, owners and names."""
        if country.id in self._countries:
            msg = f"Country {country.id} already exists."
            raise DuplicateCountryError(msg)
        self._ensure_unique(country)
        self._countries[country.id] = country
        return country

    def save(self, country: CountryState) -> CountryState:
        """Replace the stored aggregate for ``country.id``."""
        if country.id not in self._countries:
            msg = f"Country {country.id} is not stored."
            raise CountryStoreError(msg)
        self._ensure_unique(country)
        self._countries[country.id] = country
        return country

    def delete(self, country_id: UUID) -> None:
        self._countries.pop(country_id, None)

    def _ensure_unique(self, country: CountryState) -> None:
        for other in self._countries.values():
            if other.id == country.id:
                continue
            if other.name == country.name:
                msg = f"Country name '{country.name}' is already taken."
                raise DuplicateCountryError(msg)
            if other.owner_id == country.owner_id:
                msg = f"User {country.owner_id} already owns a country."
                raise DuplicateCountryError(msg)


__all__ = [
    "CountryStore",
    "CountryStoreError",
    "DuplicateCountryError",
    "InMemoryCountryStore",
]
