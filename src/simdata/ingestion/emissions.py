"""
Emissions data ingestion.

Loads energy source emission factors and unit conversion factors.
"""

from simdata.ingestion.base import DocumentLoader
from simdata.ingestion.sources import DocumentSource
from simdata.schemas.emissions import (
    ConversionContext,
    ConversionFactor,
    EmissionsData,
    EnergySource,
    EnergySourceType,
)
from simdata.schemas.registry import Domain


class EmissionsLoader(DocumentLoader[EmissionsData, EmissionsData]):
    """Loader for the emissions document."""

    domain = Domain.EMISSIONS

    def _extract(self, document: EmissionsData) -> EmissionsData:
        return document


def load_emissions_data(source: DocumentSource | None = None) -> EmissionsData:
    """
    Convenience function to load the emissions document.

    Args:
        source: Raw document provider. Defaults to the packaged fixture.

    Returns:
        Validated emissions data.
    """
    return EmissionsLoader(source).load()


def find_energy_source_by_name(
    name: str, source: DocumentSource | None = None
) -> EnergySource | None:
    """Return the first energy source whose name equals ``name``, or None."""
    data = load_emissions_data(source)
    return next((es for es in data.energy_sources if es.name == name), None)


def find_energy_sources_by_type(
    source_type: EnergySourceType, source: DocumentSource | None = None
) -> list[EnergySource]:
    """Return all energy sources of the given type, preserving document order."""
    data = load_emissions_data(source)
    return [es for es in data.energy_sources if es.type == source_type]


def find_conversion_factor(
    from_unit: str, to_unit: str, source: DocumentSource | None = None
) -> ConversionFactor | None:
    """
    Return the factor converting ``from_unit`` into ``to_unit``, or None.

    Only the exact direction is matched; the inverse is not derived.
    """
    data = load_emissions_data(source)
    return next(
        (
            factor
            for factor in data.conversion_factors
            if factor.from_unit == from_unit and factor.to_unit == to_unit
        ),
        None,
    )


def find_conversion_factors_by_context(
    context: ConversionContext, source: DocumentSource | None = None
) -> list[ConversionFactor]:
    """Return all conversion factors tagged with ``context``."""
    data = load_emissions_data(source)
    return [factor for factor in data.conversion_factors if factor.context == context]
