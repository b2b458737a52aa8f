"""Fixtures shared by the game logic tests."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any
from uuid import uuid4

import pytest

from nationforge_backend.game_logic import (
    ConstructionAdmissionController,
    CountryState,
    GameConfiguration,
    ResourceAdvancementEngine,
    get_default_catalog,
)
from nationforge_backend.shared import (
    FlagDesign,
    FlagPattern,
    GovernmentType,
    NationalValue,
    ResourceState,
)

if TYPE_CHECKING:
    from collections.abc import Callable


@pytest.fixture
def t0() -> datetime:
    return datetime(2024, 1, 1, 12, 0, tzinfo=UTC)


@pytest.fixture
def configuration() -> GameConfiguration:
    return GameConfiguration()


@pytest.fixture
def engine(configuration: GameConfiguration) -> ResourceAdvancementEngine:
    return ResourceAdvancementEngine(get_default_catalog(), configuration)


@pytest.fixture
def controller(engine: ResourceAdvancementEngine) -> ConstructionAdmissionController:
    return ConstructionAdmissionController(engine)


@pytest.fixture
def make_country(t0: datetime) -> Callable[..., CountryState]:
    """Return a builder for countries with default resources at ``t0``."""

    def _make(
        *,
        population: int = 1000,
        economy: int = 10_000,
        environment: int = 100,
        **overrides: Any,
    ) -> CountryState:
        base: dict[str, Any] = {
            "id": uuid4(),
            "owner_id": uuid4(),
            "name": "Avalon",
            "government": GovernmentType.REPUBLIC,
            "national_values": (NationalValue.FREEDOM, NationalValue.HARMONY),
            "flag": FlagDesign(
                background_color="#EF4444",
                pattern=FlagPattern.CROSS,
                pattern_color="#FFFFFF",
            ),
            "resources": ResourceState(
                population=population, economy=economy, environment=environment
            ),
            "last_resource_update": t0,
        }
        base.update(overrides)
        return CountryState(**base)

    return _make
