"""
Weather code schemas.

A weather code is a bitmask; each of its five low bits flags one condition
and contributes an independent multiplicative penalty to leg costs.
"""

import enum
from typing import Dict

import pandera as pa
from pandera.typing import DataFrame, Series


class WeatherCondition(enum.IntFlag):
    """Weather conditions encoded in bits 0-4 of a weather code."""

    CLEAR = 0
    LIGHTNING = 1
    HAIL = 2
    SNOW = 4
    RAIN = 8
    WIND = 16


WEATHER_CODE_MASK = 0b11111

WEATHER_FACTORS: Dict[WeatherCondition, float] = {
    WeatherCondition.WIND: 1.05,
    WeatherCondition.RAIN: 1.05,
    WeatherCondition.SNOW: 1.10,
    WeatherCondition.HAIL: 1.15,
    WeatherCondition.LIGHTNING: 1.20,
}


def decode_weather_code(code: int) -> WeatherCondition:
    """
    Decode a weather code into its condition flags.

    Bits above bit 4 are ignored.

    Examples:
        >>> decode_weather_code(17) == WeatherCondition.WIND | WeatherCondition.LIGHTNING
        True
        >>> decode_weather_code(32) == WeatherCondition.CLEAR
        True
    """
    return WeatherCondition(int(code) & WEATHER_CODE_MASK)


def multiplier_for_code(code: int) -> float:
    """
    Convert a weather code to its cost multiplier.

    The multiplier is the product of the factor of every set condition;
    unset conditions contribute 1.0, so the result is always >= 1.0.
    """
    condition = decode_weather_code(code)
    multiplier = 1.0
    for flag, factor in WEATHER_FACTORS.items():
        if condition & flag:
            multiplier *= factor
    return multiplier


class WeatherObservationSchema(pa.DataFrameModel):
    """Contract for the weather table: one row per (airfield, timestamp)."""

    airfield_name: Series[str] = pa.Field(
        nullable=False,
        description="Airfield the observation applies to",
    )
    timestamp: Series[int] = pa.Field(
        nullable=False,
        description="Observation time (epoch units)",
    )
    weather_code: Series[int] = pa.Field(
        ge=0,
        description="Bitmask: 1 lightning, 2 hail, 4 snow, 8 rain, 16 wind",
    )

    class Config:
        strict = False
        coerce = True
        name = "WeatherObservationSchema"
        ordered = True


WeatherDataFrame = DataFrame[WeatherObservationSchema]
