"""Database connectivity helpers and configuration objects."""

from nationforge_backend.database.base import BaseSchema
from nationforge_backend.database.dependencies import (
    get_country_repository,
    get_database,
    get_session,
)
from nationforge_backend.database.repositories import CountryRepository, UserRepository
from nationforge_backend.database.schemas import CountrySchema, UserSchema
from nationforge_backend.database.service import DatabaseService
from nationforge_backend.settings import BackendSettings, get_settings

__all__ = [
    "BackendSettings",
    "BaseSchema",
    "CountryRepository",
    "CountrySchema",
    "DatabaseService",
    "UserRepository",
    "UserSchema",
    "get_country_repository",
    "get_database",
    "get_session",
    "get_settings",
]
