"""
Flight direction schema using Pandera.

A flight direction is a permitted direct flight between two airports.
"""

import pandera as pa
from pandera.typing import DataFrame, Series


class FlightDirectionSchema(pa.DataFrameModel):
    """
    Contract for the directions table: one row per directed edge.

    Duplicate rows are allowed and produce duplicate edges.
    """

    from_code: Series[str] = pa.Field(
        nullable=False,
        description="Departure airport code",
    )
    to_code: Series[str] = pa.Field(
        nullable=False,
        description="Arrival airport code",
    )

    class Config:
        strict = False
        coerce = True
        name = "FlightDirectionSchema"
        ordered = True


FlightDirectionDataFrame = DataFrame[FlightDirectionSchema]
