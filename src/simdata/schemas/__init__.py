"""
Schema definitions using Pydantic for document validation.

All data contracts are defined here so every loader validates
against an explicit, declarative structure.
"""

from simdata.schemas.emissions import (
    CONVERSION_CONTEXTS,
    ENERGY_SOURCE_TYPES,
    ConversionFactor,
    EmissionsData,
    EnergySource,
)
from simdata.schemas.registry import Domain, SchemaRegistry
from simdata.schemas.simulation import INCENTIVE_TYPES, Incentive, SimulationParams
from simdata.schemas.tariff import TARIFF_TYPES, Tariff, TariffCollection, TimeRange
from simdata.schemas.validator import (
    FieldError,
    ValidationFailure,
    ValidationSuccess,
    validate_document,
)

__all__ = [
    "CONVERSION_CONTEXTS",
    "ENERGY_SOURCE_TYPES",
    "INCENTIVE_TYPES",
    "TARIFF_TYPES",
    "ConversionFactor",
    "Domain",
    "EmissionsData",
    "EnergySource",
    "FieldError",
    "Incentive",
    "SchemaRegistry",
    "SimulationParams",
    "Tariff",
    "TariffCollection",
    "TimeRange",
    "ValidationFailure",
    "ValidationSuccess",
    "validate_document",
]
