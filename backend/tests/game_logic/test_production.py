"""Tests for hourly production calculation."""

from nationforge_backend.game_logic.catalog import (
    BuildingCatalog,
    BuildingCost,
    BuildingDefinition,
    get_default_catalog,
)
from nationforge_backend.game_logic.configuration import GameConfiguration
from nationforge_backend.game_logic.production import compute_hourly_production
from nationforge_backend.game_logic.state import OwnedBuilding
from nationforge_backend.shared import ProductionRates


def _definition(population: int, economy: int, environment: int) -> BuildingDefinition:
    return BuildingDefinition(
        name="Test",
        description="",
        cost=BuildingCost(economy=0),
        effects=ProductionRates(
            population=population, economy=economy, environment=environment
        ),
        build_time=1,
    )


def test_base_production_without_buildings(make_country, configuration) -> None:
    production = compute_hourly_production(
        make_country(), get_default_catalog(), configuration
    )

    assert production == ProductionRates(population=10, economy=100, environment=0)


def test_buildings_contribute_effects_times_count(make_country, configuration) -> None:
    country = make_country(
        buildings=(
            OwnedBuilding(type="HOUSE", count=2),
            OwnedBuilding(type="FACTORY", count=1),
        )
    )

    production = compute_hourly_production(country, get_default_catalog(), configuration)

    assert production == ProductionRates(
        population=10 + 2 * 100 - 10,
        economy=100 + 2 * 5 + 50,
        environment=0 + 2 * -2 - 10,
    )


def test_production_is_additive_for_arbitrary_catalog(
    make_country, configuration
) -> None:
    catalog = BuildingCatalog({"A": _definition(3, -4, 5), "B": _definition(-7, 11, 0)})
    country = make_country(
        buildings=(OwnedBuilding(type="A", count=2), OwnedBuilding(type="B", count=1))
    )

    production = compute_hourly_production(country, catalog, configuration)

    assert production == ProductionRates(
        population=10 + 2 * 3 - 7,
        economy=100 + 2 * -4 + 11,
        environment=0 + 2 * 5,
    )


def test_unknown_building_types_are_skipped(make_country, configuration) -> None:
    country = make_country(
        buildings=(
            OwnedBuilding(type="RETIRED_MONUMENT", count=4),
            OwnedBuilding(type="PARK", count=1),
        )
    )

    production = compute_hourly_production(country, get_default_catalog(), configuration)

    assert production == ProductionRates(population=30, economy=95, environment=15)


def test_base_production_comes_from_configuration(make_country) -> None:
    configuration = GameConfiguration(
        base_production=ProductionRates(population=-7, economy=0, environment=1)
    )

    production = compute_hourly_production(
        make_country(), get_default_catalog(), configuration
    )

    assert production == ProductionRates(population=-7, economy=0, environment=1)


def test_production_does_not_touch_country(make_country, configuration) -> None:
    country = make_country(buildings=(OwnedBuilding(type="OFFICE", count=3),))
    snapshot = country.model_dump()

    compute_hourly_production(country, get_default_catalog(), configuration)

    assert country.model_dump() == snapshot
