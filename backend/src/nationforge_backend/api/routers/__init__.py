"""Route definitions for public HTTP endpoints."""

from nationforge_backend.api.routers.auth import router as auth_router
from nationforge_backend.api.routers.buildings import router as buildings_router
from nationforge_backend.api.routers.countries import router as countries_router
from nationforge_backend.api.routers.users import router as users_router

__all__ = ["auth_router", "buildings_router", "countries_router", "users_router"]
