"""Repositories translating between schemas and domain objects."""

from nationforge_backend.database.repositories.country import CountryRepository
from nationforge_backend.database.repositories.user import UserRepository

__all__ = ["CountryRepository", "UserRepository"]
