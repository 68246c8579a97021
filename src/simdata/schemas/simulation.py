"""Pydantic schemas for the financial simulation parameters."""

from typing import Annotated, Literal, get_args

from pydantic import Field

from simdata.schemas.base import DocumentModel, IsoDateTime, NotNull, WholeNumber

IncentiveType = Literal["rebate", "taxCredit", "grant"]

INCENTIVE_TYPES: tuple[str, ...] = get_args(IncentiveType)


class Incentive(DocumentModel):
    """Public incentive reducing the net investment."""

    name: str
    type: IncentiveType
    amount: float = Field(gt=0)
    max_limit: Annotated[float | None, NotNull] = Field(default=None, alias="maxLimit", gt=0)
    expiration_date: Annotated[IsoDateTime | None, NotNull] = Field(
        default=None, alias="expirationDate"
    )


class SimulationParams(DocumentModel):
    """
    Singleton parameter record driving the financial simulation.

    Percentages (degradation, inflation, rates) are expressed in percent,
    not as fractions.
    """

    initial_investment: float = Field(alias="initialInvestment", gt=0)
    system_lifespan: WholeNumber = Field(alias="systemLifespan", gt=0, description="Years")
    maintenance_cost: float = Field(alias="maintenanceCost", ge=0)
    annual_degradation: float = Field(alias="annualDegradation", ge=0, le=100)
    energy_price_inflation: float = Field(alias="energyPriceInflation", ge=-100, le=100)
    financing_rate: Annotated[float | None, NotNull] = Field(
        default=None, alias="financingRate", ge=0, le=100
    )
    financing_years: Annotated[WholeNumber | None, NotNull] = Field(
        default=None, alias="financingYears", gt=0
    )
    tax_rate: Annotated[float | None, NotNull] = Field(
        default=None, alias="taxRate", ge=0, le=100
    )
    incentives: Annotated[list[Incentive] | None, NotNull] = None
    updated_at: IsoDateTime = Field(alias="updatedAt")
