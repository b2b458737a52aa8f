"""Core rules and mechanics that drive nation gameplay."""

from nationforge_backend.game_logic.advancement import (
    AdvancementResult,
    ResourceAdvancementEngine,
)
from nationforge_backend.game_logic.catalog import (
    DEFAULT_BUILDING_DEFINITIONS,
    BuildingCatalog,
    BuildingCost,
    BuildingDefinition,
    BuildingRequirements,
    get_default_catalog,
)
from nationforge_backend.game_logic.configuration import (
    GameConfiguration,
    GameDefaults,
    get_default_game_configuration,
)
from nationforge_backend.game_logic.construction import (
    REJECTION_MESSAGES,
    ConstructionAdmissionController,
    ConstructionOutcome,
    RejectionReason,
)
from nationforge_backend.game_logic.persistence import (
    CountryStore,
    CountryStoreError,
    DuplicateCountryError,
    InMemoryCountryStore,
)
from nationforge_backend.game_logic.production import compute_hourly_production
from nationforge_backend.game_logic.state import (
    MAX_NATIONAL_VALUES,
    ConstructionOrder,
    CountryState,
    OwnedBuilding,
)

__all__ = [
    "DEFAULT_BUILDING_DEFINITIONS",
    "MAX_NATIONAL_VALUES",
    "REJECTION_MESSAGES",
    "AdvancementResult",
    "BuildingCatalog",
    "BuildingCost",
    "BuildingDefinition",
    "BuildingRequirements",
    "ConstructionAdmissionController",
    "ConstructionOrder",
    "ConstructionOutcome",
    "CountryState",
    "CountryStore",
    "CountryStoreError",
    "DuplicateCountryError",
    "GameConfiguration",
    "GameDefaults",
    "InMemoryCountryStore",
    "OwnedBuilding",
    "RejectionReason",
    "ResourceAdvancementEngine",
    "compute_hourly_production",
    "get_default_catalog",
    "get_default_game_configuration",
]
