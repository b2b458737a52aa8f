"""Factory for constructing the FastAPI application."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from nationforge_backend.api.routers import (
    auth_router,
    buildings_router,
    countries_router,
    users_router,
)
from nationforge_backend.game_logic import CountryStoreError
from nationforge_backend.settings import get_settings

logger = logging.getLogger(__name__)


async def _handle_storage_error(
    request: Request, exc: CountryStoreError
) -> JSONResponse:
    """Report storage failures as a generic server error."""
    logger.error(
        "Storage failure while handling %s %s: %s",
        request.method,
        request.url.path,
        exc,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Server error"},
    )


def create_api() -> FastAPI:
    """Instantiate and configure the FastAPI application."""
    app = FastAPI(title="Nationforge API")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=get_settings().cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(CountryStoreError, _handle_storage_error)
    app.include_router(auth_router)
    app.include_router(users_router)
    app.include_router(countries_router)
    app.include_router(buildings_router)

    @app.get("/health", tags=["health"])
    def health() -> dict[str, str]:
        """Report that the server is running."""
        return {"status": "ok", "message": "Server is running"}

    return app
