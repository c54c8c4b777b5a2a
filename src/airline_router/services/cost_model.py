"""
Cost Model - time-dependent cost of a single direct flight.

A leg costs a fixed base amount, scaled by the weather multiplier at both
endpoints, plus the great-circle distance between them:

    cost = 300 * w(from, t) * w(to, t) + distance_km

The same timestamp is used for every leg of a route; time is not advanced
by estimated flight duration.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

import numpy as np

from src.airline_router.schemas.airport import Airport
from src.airline_router.schemas.route import RouteLeg

if TYPE_CHECKING:
    from src.airline_router.adapters.repositories.weather_table import WeatherTable

EARTH_RADIUS_KM = 6371.0
BASE_LEG_COST = 300.0


def great_circle_distance_km(
    lat1: float, lon1: float, lat2: float, lon2: float
) -> float:
    """
    Haversine distance between two points given in degrees.

    Examples:
        >>> round(great_circle_distance_km(0.0, 0.0, 0.0, 1.0), 2)
        111.19
    """
    phi1 = np.radians(lat1)
    phi2 = np.radians(lat2)
    d_phi = np.radians(lat2 - lat1)
    d_lambda = np.radians(lon2 - lon1)

    a = np.sin(d_phi / 2) ** 2 + np.cos(phi1) * np.cos(phi2) * np.sin(d_lambda / 2) ** 2
    c = 2 * np.arctan2(np.sqrt(a), np.sqrt(1 - a))

    return float(EARTH_RADIUS_KM * c)


def airport_distance_km(origin: Airport, destination: Airport) -> float:
    """Great-circle distance between two airports."""
    return great_circle_distance_km(
        origin.latitude, origin.longitude, destination.latitude, destination.longitude
    )


class CostModel:
    """
    Combines distance and endpoint weather into a leg cost.

    Stateless apart from its read-only weather table; safe to share
    between concurrent searches.

    Attributes:
        _weather: Weather table queried for both endpoints.
        _base_cost: Base cost of a leg before weather scaling.
    """

    def __init__(self, weather: WeatherTable, base_cost: float = BASE_LEG_COST) -> None:
        if base_cost <= 0:
            raise ValueError(f"base_cost must be > 0, got {base_cost}")
        self._weather = weather
        self._base_cost = base_cost

    def leg_cost(self, origin: Airport, destination: Airport, timestamp: int) -> float:
        """Cost of flying origin -> destination with weather evaluated at timestamp."""
        distance = airport_distance_km(origin, destination)
        w_from = self._weather.weather_multiplier(origin.airfield_name, timestamp)
        w_to = self._weather.weather_multiplier(destination.airfield_name, timestamp)
        return self._base_cost * w_from * w_to + distance

    def leg(
        self,
        origin: Airport,
        destination: Airport,
        timestamp: int,
        leg_index: int = 0,
    ) -> RouteLeg:
        """Same value as leg_cost, with its breakdown."""
        distance = airport_distance_km(origin, destination)
        w_from = self._weather.weather_multiplier(origin.airfield_name, timestamp)
        w_to = self._weather.weather_multiplier(destination.airfield_name, timestamp)
        return RouteLeg(
            leg_index=leg_index,
            departure_airport=origin.code,
            arrival_airport=destination.code,
            distance_km=distance,
            departure_multiplier=w_from,
            arrival_multiplier=w_to,
            cost=self._base_cost * w_from * w_to + distance,
        )

    def legs(self, path: Sequence[Airport], timestamp: int) -> list[RouteLeg]:
        """Breakdown of every consecutive pair in path."""
        return [
            self.leg(origin, destination, timestamp, leg_index=i)
            for i, (origin, destination) in enumerate(zip(path, path[1:]))
        ]

    def path_cost(self, path: Sequence[Airport], timestamp: int) -> float:
        """Sum of leg costs over consecutive pairs in path (0.0 for one airport)."""
        return float(
            sum(
                self.leg_cost(origin, destination, timestamp)
                for origin, destination in zip(path, path[1:])
            )
        )

    @property
    def base_cost(self) -> float:
        return self._base_cost
