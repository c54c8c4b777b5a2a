"""
Weather Table - sparse per-airfield weather series.

Lookups match timestamps exactly; there is no interpolation and no
"most recent prior observation" fallback.
"""

from __future__ import annotations

import logging
from typing import Dict, Optional

from src.airline_router.exceptions import InvalidWeatherCodeError, ReadOnlyNetworkError
from src.airline_router.schemas.weather import (
    WeatherCondition,
    decode_weather_code,
    multiplier_for_code,
)

logger = logging.getLogger(__name__)

# Multiplier used when no observation exists for (airfield, timestamp)
NO_DATA_MULTIPLIER = 1.0


class WeatherTable:
    """
    Weather observations keyed by airfield name, then by timestamp.

    Attributes:
        _series: Dict mapping airfield name to {timestamp: weather code}.
    """

    def __init__(self) -> None:
        self._series: Dict[str, Dict[int, int]] = {}
        self._frozen = False

    def record_observation(self, airfield_name: str, timestamp: int, code: int) -> None:
        """
        Insert or overwrite the observation for (airfield_name, timestamp).

        The airfield's series is created on its first observation.

        Raises:
            InvalidWeatherCodeError: If code is negative.
            ReadOnlyNetworkError: If the table has been frozen.
        """
        if self._frozen:
            raise ReadOnlyNetworkError("WeatherTable is frozen")
        if code < 0:
            raise InvalidWeatherCodeError(code)

        series = self._series.setdefault(airfield_name, {})
        if timestamp in series and series[timestamp] != code:
            logger.debug(
                "Overwriting weather at %s/%d: %d -> %d",
                airfield_name,
                timestamp,
                series[timestamp],
                code,
            )
        series[timestamp] = int(code)

    def weather_code(self, airfield_name: str, timestamp: int) -> Optional[int]:
        """Raw code at exactly timestamp, or None when there is no data."""
        series = self._series.get(airfield_name)
        if series is None:
            return None
        return series.get(timestamp)

    def condition_at(
        self, airfield_name: str, timestamp: int
    ) -> Optional[WeatherCondition]:
        """Decoded conditions at exactly timestamp, or None when there is no data."""
        code = self.weather_code(airfield_name, timestamp)
        if code is None:
            return None
        return decode_weather_code(code)

    def weather_multiplier(self, airfield_name: str, timestamp: int) -> float:
        """
        Cost multiplier for an airfield at a timestamp.

        Returns 1.0 when the airfield has no series or no entry at exactly
        that timestamp; otherwise the product of the factors of every set
        condition. Always >= 1.0.
        """
        code = self.weather_code(airfield_name, timestamp)
        if code is None:
            return NO_DATA_MULTIPLIER
        return multiplier_for_code(code)

    def freeze(self) -> "WeatherTable":
        """Make the table read-only and return it."""
        self._frozen = True
        return self

    @property
    def is_frozen(self) -> bool:
        return self._frozen

    @property
    def airfields(self) -> frozenset[str]:
        """Names of all airfields with at least one observation."""
        return frozenset(self._series)

    @property
    def observation_count(self) -> int:
        """Total number of (airfield, timestamp) entries."""
        return sum(len(series) for series in self._series.values())

    def __contains__(self, airfield_name: object) -> bool:
        return airfield_name in self._series
