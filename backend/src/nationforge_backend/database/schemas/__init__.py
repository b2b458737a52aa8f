"""SQLAlchemy schemas backing the persisted game state."""

from nationforge_backend.database.schemas.country import CountrySchema
from nationforge_backend.database.schemas.user import UserSchema

__all__ = ["CountrySchema", "UserSchema"]
