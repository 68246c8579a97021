"""
Data ingestion layer for loading documents with schema validation.

All document loading happens through this module to ensure
consistent validation at system boundaries.
"""

from simdata.ingestion.emissions import (
    EmissionsLoader,
    find_conversion_factor,
    find_conversion_factors_by_context,
    find_energy_source_by_name,
    find_energy_sources_by_type,
    load_emissions_data,
)
from simdata.ingestion.simulation import SimulationParamsLoader, load_simulation_params
from simdata.ingestion.sources import (
    DocumentSource,
    InMemoryDocument,
    JsonFileDocument,
    PackagedDocument,
    source_for,
)
from simdata.ingestion.tariffs import (
    TariffLoader,
    find_tariff_by_name,
    find_tariffs_by_type,
    load_tariffs,
)

__all__ = [
    "DocumentSource",
    "EmissionsLoader",
    "InMemoryDocument",
    "JsonFileDocument",
    "PackagedDocument",
    "SimulationParamsLoader",
    "TariffLoader",
    "find_conversion_factor",
    "find_conversion_factors_by_context",
    "find_energy_source_by_name",
    "find_energy_sources_by_type",
    "find_tariff_by_name",
    "find_tariffs_by_type",
    "load_emissions_data",
    "load_simulation_params",
    "load_tariffs",
    "source_for",
]
