"""Pydantic schemas for emissions factors and unit conversions."""

from typing import Annotated, Literal, get_args

from pydantic import Field

from simdata.schemas.base import DocumentModel, IsoDateTime, NotNull

EnergySourceType = Literal["renewable", "fossil", "nuclear", "hybrid"]
ConversionContext = Literal["energy", "emissions", "power"]

ENERGY_SOURCE_TYPES: tuple[str, ...] = get_args(EnergySourceType)
CONVERSION_CONTEXTS: tuple[str, ...] = get_args(ConversionContext)


class EnergySource(DocumentModel):
    """Emissions profile of one generation technology."""

    name: str = Field(description="Source name, used as lookup key")
    type: EnergySourceType
    co2_per_kwh: float = Field(alias="co2PerKWh", ge=0, description="Operational g CO2/kWh")
    lifecycle_emissions: float = Field(
        alias="lifecycleEmissions", ge=0, description="Lifecycle g CO2eq/kWh"
    )
    conversion_efficiency: float = Field(
        alias="conversionEfficiency", ge=0, le=100, description="Efficiency in percent"
    )
    updated_at: IsoDateTime = Field(alias="updatedAt")


class ConversionFactor(DocumentModel):
    """Multiplicative factor converting ``from_unit`` into ``to_unit``."""

    from_unit: str = Field(alias="fromUnit")
    to_unit: str = Field(alias="toUnit")
    factor: float = Field(gt=0)
    context: Annotated[ConversionContext | None, NotNull] = None
    notes: Annotated[str | None, NotNull] = None


class EmissionsData(DocumentModel):
    """Complete emissions document."""

    energy_sources: list[EnergySource] = Field(alias="energySources")
    conversion_factors: list[ConversionFactor] = Field(alias="conversionFactors")
