"""Shared utilities, shared models and cross-cutting helpers for the backend."""

from nationforge_backend.shared.clock import Clock, FixedClock, SystemClock
from nationforge_backend.shared.enums import FlagPattern, GovernmentType, NationalValue
from nationforge_backend.shared.value_objects import (
    DOMAIN_MODEL_CONFIG,
    ENVIRONMENT_MAX,
    ENVIRONMENT_MIN,
    FlagDesign,
    ProductionRates,
    ResourceState,
)

__all__ = [
    "DOMAIN_MODEL_CONFIG",
    "ENVIRONMENT_MAX",
    "ENVIRONMENT_MIN",
    "Clock",
    "FixedClock",
    "FlagDesign",
    "FlagPattern",
    "GovernmentType",
    "NationalValue",
    "ProductionRates",
    "ResourceState",
    "SystemClock",
]
