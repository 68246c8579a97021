"""
Pydantic schemas for electricity tariffs.

A tariffs document is a wrapper object holding the list of tariffs:
``{"tariffs": [...]}``.
"""

from typing import Annotated, Literal, get_args

from pydantic import Field

from simdata.schemas.base import DocumentModel, IsoDateTime, NotNull

TariffType = Literal["fixed", "variable"]

TARIFF_TYPES: tuple[str, ...] = get_args(TariffType)


class TimeRange(DocumentModel):
    """
    Hourly price band of a variable tariff.

    No ordering is enforced between start and end hour, so overnight bands
    such as 22 to 6 are accepted as written.
    """

    start_hour: float = Field(alias="startHour", ge=0, le=23)
    end_hour: float = Field(alias="endHour", ge=0, le=23)
    multiplier: float = Field(gt=0, description="Factor applied to the energy price")


class Tariff(DocumentModel):
    """Electricity tariff with fixed and energy-dependent price components."""

    name: str = Field(description="Tariff name, used as lookup key")
    type: TariffType
    base_price: float = Field(alias="basePrice", gt=0)
    energy_price: float = Field(alias="energyPrice", gt=0, description="Price per kWh")
    power_price: Annotated[float | None, NotNull] = Field(
        default=None, alias="powerPrice", gt=0, description="Price per contracted kW"
    )
    time_ranges: Annotated[list[TimeRange] | None, NotNull] = Field(
        default=None, alias="timeRanges"
    )
    updated_at: IsoDateTime = Field(alias="updatedAt")


class TariffCollection(DocumentModel):
    """Outer shape of the tariffs document."""

    tariffs: list[Tariff]
