"""
Repository adapters for the airline network.
"""

from src.airline_router.adapters.repositories.airport_directory import AirportDirectory
from src.airline_router.adapters.repositories.flight_graph import FlightGraph
from src.airline_router.adapters.repositories.network_repo import (
    AirlineNetwork,
    NetworkRepository,
    build_airport_directory,
    build_flight_graph,
    build_weather_table,
)
from src.airline_router.adapters.repositories.weather_table import WeatherTable

__all__ = [
    "AirlineNetwork",
    "AirportDirectory",
    "FlightGraph",
    "NetworkRepository",
    "WeatherTable",
    "build_airport_directory",
    "build_flight_graph",
    "build_weather_table",
]
