"""Hourly production derived from base growth and owned buildings."""

from __future__ import annotations

from typing import TYPE_CHECKING

from nationforge_backend.shared.value_objects import ProductionRates

if TYPE_CHECKING:
    from nationforge_backend.game_logic.catalog import BuildingCatalog
    from nationforge_backend.game_logic.configuration import GameConfiguration
    from nationforge_backend.game_logic.state import CountryState


def compute_hourly_production(
    country: CountryState,
    catalog: BuildingCatalog,
    configuration: GameConfiguration,
) -> ProductionRates:
    """Return the net per-hour resource change for *country*.

    Base growth from *configuration* is combined with the effects of every
    owned building multiplied by its count. Buildings whose type is missing
    from *catalog* contribute nothing.
    """
    production = configuration.base_production
    for building in country.buildings:
        definition = catalog.lookup(building.type)
        if definition is None:
            continue
        production = production.add(definition.effects, times=building.count)
    return production


__all__ = ["compute_hourly_production"]
