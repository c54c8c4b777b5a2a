"""
Schema definitions for the Airline Router.

Immutable records plus Pandera-validated DataFrames as the data contracts
for every tabular input.
"""

from .airport import Airport, AirportDataFrame, AirportSchema
from .flight import FlightDirectionDataFrame, FlightDirectionSchema
from .route import (
    RouteLeg,
    RouteRequest,
    RouteRequestDataFrame,
    RouteRequestSchema,
    RouteResult,
    RouteStatus,
)
from .weather import (
    WEATHER_FACTORS,
    WeatherCondition,
    WeatherDataFrame,
    WeatherObservationSchema,
    decode_weather_code,
    multiplier_for_code,
)

__all__ = [
    # Airport
    "Airport",
    "AirportSchema",
    "AirportDataFrame",
    # Flight directions
    "FlightDirectionSchema",
    "FlightDirectionDataFrame",
    # Weather
    "WeatherCondition",
    "WEATHER_FACTORS",
    "WeatherObservationSchema",
    "WeatherDataFrame",
    "decode_weather_code",
    "multiplier_for_code",
    # Routes
    "RouteRequest",
    "RouteRequestSchema",
    "RouteRequestDataFrame",
    "RouteLeg",
    "RouteResult",
    "RouteStatus",
]
