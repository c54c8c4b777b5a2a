"""
Airline Network Repository - build-once, read-only network infrastructure.

Builds the airport directory, weather table and flight graph from a data
provider, freezes them and publishes them together as one AirlineNetwork:
- Load phase runs to completion before any reader sees the network
- Bad records are scoped: a duplicate airport or an edge with an unknown
  endpoint is logged and skipped, the load continues
- Readers never block after the first (cold start) build
"""

from __future__ import annotations

import hashlib
import logging
import threading
from dataclasses import dataclass
from datetime import datetime
from typing import TYPE_CHECKING, Optional

import pandas as pd

from src.airline_router.adapters.repositories.airport_directory import AirportDirectory
from src.airline_router.adapters.repositories.flight_graph import FlightGraph
from src.airline_router.adapters.repositories.weather_table import WeatherTable
from src.airline_router.exceptions import (
    DuplicateAirportError,
    NetworkNotInitializedError,
    UnknownAirportError,
)
from src.airline_router.schemas.airport import Airport

if TYPE_CHECKING:
    from src.airline_router.ports.network_data_provider import NetworkDataProvider

logger = logging.getLogger(__name__)


# =============================================================================
# BUILDERS: DataFrame -> mutable structure (load phase only)
# =============================================================================


def build_airport_directory(airports_df: pd.DataFrame) -> tuple[AirportDirectory, int]:
    """
    Build an AirportDirectory from a validated airports DataFrame.

    Duplicate codes keep the first record.

    Returns:
        (directory, number of duplicate rows skipped)
    """
    directory = AirportDirectory()
    skipped = 0

    for code, airfield, lat, lon, parking in zip(
        airports_df["code"],
        airports_df["airfield_name"],
        airports_df["latitude"],
        airports_df["longitude"],
        airports_df["parking_cost"],
    ):
        airport = Airport(
            code=str(code),
            airfield_name=str(airfield),
            latitude=float(lat),
            longitude=float(lon),
            parking_cost=float(parking),
        )
        try:
            directory.add(airport)
        except DuplicateAirportError as e:
            skipped += 1
            logger.warning("Skipping airport record: %s", e)

    return directory, skipped


def build_weather_table(weather_df: pd.DataFrame) -> WeatherTable:
    """Build a WeatherTable from a validated weather DataFrame."""
    table = WeatherTable()

    for airfield, timestamp, code in zip(
        weather_df["airfield_name"],
        weather_df["timestamp"],
        weather_df["weather_code"],
    ):
        table.record_observation(str(airfield), int(timestamp), int(code))

    return table


def build_flight_graph(
    directory: AirportDirectory, directions_df: pd.DataFrame
) -> tuple[FlightGraph, int]:
    """
    Build a FlightGraph over directory from a validated directions DataFrame.

    Returns:
        (graph, number of edges skipped for unknown endpoints)
    """
    graph = FlightGraph(directory)
    skipped = 0

    for from_code, to_code in zip(directions_df["from_code"], directions_df["to_code"]):
        try:
            graph.add_edge(str(from_code), str(to_code))
        except UnknownAirportError:
            skipped += 1
            logger.warning("Airport not found for direction: %s -> %s", from_code, to_code)

    return graph, skipped


# =============================================================================
# AIRLINE NETWORK: frozen value object handed to the query engine
# =============================================================================


@dataclass(frozen=True)
class AirlineNetwork:
    """
    Read-only airline network.

    Attributes:
        airports: Frozen directory of all airports.
        weather: Frozen per-airfield weather series.
        graph: Frozen directed graph of direct flights.
        built_at: Timestamp when the network was built.
        version: Hash of the source tables for change tracking.
        skipped_airports: Duplicate airport rows ignored at load time.
        skipped_edges: Direction rows ignored for unknown endpoints.
    """

    airports: AirportDirectory
    weather: WeatherTable
    graph: FlightGraph
    built_at: datetime
    version: str
    skipped_airports: int = 0
    skipped_edges: int = 0

    @classmethod
    def from_frames(
        cls,
        airports_df: pd.DataFrame,
        weather_df: pd.DataFrame,
        directions_df: pd.DataFrame,
    ) -> "AirlineNetwork":
        """
        Build and freeze a network from validated DataFrames.

        Steps:
        1. Airports (duplicates skipped)
        2. Weather observations (later rows overwrite earlier ones)
        3. Flight directions (unknown endpoints skipped)
        4. Freeze all three structures
        """
        directory, skipped_airports = build_airport_directory(airports_df)
        weather = build_weather_table(weather_df)
        graph, skipped_edges = build_flight_graph(directory, directions_df)

        return cls(
            airports=directory.freeze(),
            weather=weather.freeze(),
            graph=graph.freeze(),
            built_at=datetime.now(),
            version=compute_version(airports_df, weather_df, directions_df),
            skipped_airports=skipped_airports,
            skipped_edges=skipped_edges,
        )

    @property
    def airport_count(self) -> int:
        return len(self.airports)

    @property
    def edge_count(self) -> int:
        return self.graph.edge_count


def compute_version(*frames: pd.DataFrame) -> str:
    """Compute a short hash of the source tables for version tracking."""
    digest = hashlib.md5()
    for df in frames:
        digest.update(f"{len(df)}:{df.columns.tolist()}".encode())
        if len(df) > 0:
            # Include first and last row for change detection
            digest.update(f":{df.iloc[0].to_dict()}:{df.iloc[-1].to_dict()}".encode())
    return digest.hexdigest()[:12]


# =============================================================================
# NETWORK REPOSITORY: one-time build with thread-safe cold start
# =============================================================================


class NetworkRepository:
    """
    Repository that builds the airline network once and serves it read-only.

    Usage:
        >>> provider = CsvNetworkDataProvider(airports, directions, weather)
        >>> repo = NetworkRepository(provider)
        >>> network = repo.get_network()  # Blocks only on the first call
    """

    def __init__(self, data_provider: NetworkDataProvider) -> None:
        """
        Initialize repository with a data provider.

        Args:
            data_provider: Source for the airline network tables.
        """
        self._provider = data_provider
        self._network: Optional[AirlineNetwork] = None
        self._build_lock = threading.Lock()

    def get_network(self) -> AirlineNetwork:
        """
        Get the network, building it on first access.

        Returns:
            The frozen AirlineNetwork.

        Raises:
            NetworkNotInitializedError: If the build fails.
        """
        network = self._network
        if network is not None:
            return network

        with self._build_lock:
            # Double-check after acquiring lock
            if self._network is not None:
                return self._network

            try:
                self._network = self._build_network()
            except Exception as e:
                logger.error("Network build failed: %s", e)
                raise NetworkNotInitializedError(
                    f"Failed to build airline network from {self._provider.name}: {e}"
                ) from e

            return self._network

    def _build_network(self) -> AirlineNetwork:
        """Fetch every table from the provider and build the network."""
        network = AirlineNetwork.from_frames(
            airports_df=self._provider.get_airports_df(),
            weather_df=self._provider.get_weather_df(),
            directions_df=self._provider.get_directions_df(),
        )
        logger.info(
            "Airline network loaded from %s: %d airports, %d airfields with weather "
            "(%d observations), %d flight directions (%d skipped, %d duplicate airports)",
            self._provider.name,
            network.airport_count,
            len(network.weather.airfields),
            network.weather.observation_count,
            network.edge_count,
            network.skipped_edges,
            network.skipped_airports,
        )
        return network

    @property
    def provider(self) -> NetworkDataProvider:
        return self._provider

    @property
    def is_initialized(self) -> bool:
        """Check if the network has been built."""
        return self._network is not None

    @property
    def current_version(self) -> Optional[str]:
        """Get version of the built network."""
        return self._network.version if self._network else None
