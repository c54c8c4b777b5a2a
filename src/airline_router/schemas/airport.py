"""
Airport schemas using Pandera.

Defines the record type held by the airport directory and the tabular
contract the airport loader must satisfy.
"""

from dataclasses import dataclass

import pandera as pa
from pandera.typing import DataFrame, Series


@dataclass(frozen=True)
class Airport:
    """
    Immutable airport record.

    Attributes:
        code: Unique airport code (directory key).
        airfield_name: Airfield hosting this airport (weather series key).
        latitude: Latitude in degrees.
        longitude: Longitude in degrees.
        parking_cost: Parking cost, carried but not used by leg costs.
    """

    code: str
    airfield_name: str
    latitude: float
    longitude: float
    parking_cost: float = 0.0

    def __post_init__(self) -> None:
        """Validate record after initialization."""
        if not self.code:
            raise ValueError("code cannot be empty")
        if not -90.0 <= self.latitude <= 90.0:
            raise ValueError(f"latitude must be within [-90, 90], got {self.latitude}")
        if not -180.0 <= self.longitude <= 180.0:
            raise ValueError(
                f"longitude must be within [-180, 180], got {self.longitude}"
            )


class AirportSchema(pa.DataFrameModel):
    """Contract for the airports table: one row per airport."""

    code: Series[str] = pa.Field(
        nullable=False,
        str_length={"min_value": 1},
        description="Unique airport code",
    )
    airfield_name: Series[str] = pa.Field(
        nullable=False,
        description="Airfield the airport belongs to",
    )
    latitude: Series[float] = pa.Field(
        ge=-90,
        le=90,
        description="Latitude in degrees",
    )
    longitude: Series[float] = pa.Field(
        ge=-180,
        le=180,
        description="Longitude in degrees",
    )
    parking_cost: Series[float] = pa.Field(
        nullable=False,
        description="Parking cost at the airport",
    )

    class Config:
        strict = False
        coerce = True
        name = "AirportSchema"
        ordered = True


AirportDataFrame = DataFrame[AirportSchema]
