"""
PlanMissions Use Case - Public API for airline routing.

This module provides the main entry point for the routing engine.
It acts as a Facade/Factory, handling dependency initialization and
providing a clean interface for consumers.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional, Union

from src.airline_router.adapters.algorithms.dijkstra_adapter import DijkstraRouteFinder
from src.airline_router.adapters.data_providers.csv_provider import (
    CsvNetworkDataProvider,
)
from src.airline_router.adapters.repositories.network_repo import NetworkRepository
from src.airline_router.adapters.sinks.text_file_sink import TextFileResultSink
from src.airline_router.config import Settings
from src.airline_router.ports.network_data_provider import NetworkDataProvider
from src.airline_router.ports.result_sink import ResultSink
from src.airline_router.ports.route_finder import RouteFinder
from src.airline_router.schemas.route import RouteRequest, RouteResult
from src.airline_router.services.route_finder_service import (
    RouteFinderService,
    requests_from_frame,
)

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


class PlanMissions:
    """
    Public API for planning cheapest airline routes.

    Example usage:
        >>> planner = PlanMissions.from_files(
        ...     "airports.csv", "directions.csv", "weather.csv", "missions.in"
        ... )
        >>> result = planner.route("IST", "JFK", 1682946000)
        >>> print(result.to_line())
        >>> planner.run(TextFileResultSink("output.out"))

    Attributes:
        _service: Underlying RouteFinderService.
        _network_repo: Airline network repository.
    """

    def __init__(
        self,
        data_provider: NetworkDataProvider,
        route_finder: Optional[RouteFinder] = None,
        search_timeout: Optional[float] = None,
    ) -> None:
        """
        Initialize the planner with optional custom dependencies.

        Args:
            data_provider: Source of airports, weather, directions and missions.
            route_finder: Custom algorithm. If None, uses DijkstraRouteFinder.
            search_timeout: Per-search deadline for the default algorithm.
        """
        self._data_provider = data_provider
        self._network_repo = NetworkRepository(data_provider)

        if route_finder is not None:
            self._route_finder = route_finder
        else:
            self._route_finder = DijkstraRouteFinder(timeout=search_timeout)

        self._service = RouteFinderService(
            network_repo=self._network_repo,
            route_finder=self._route_finder,
        )

        logger.info(
            "PlanMissions initialized with %s algorithm over %s",
            self._route_finder.name,
            data_provider.name,
        )

    @classmethod
    def from_files(
        cls,
        airports_path: PathLike,
        directions_path: PathLike,
        weather_path: PathLike,
        missions_path: Optional[PathLike] = None,
        search_timeout: Optional[float] = None,
    ) -> "PlanMissions":
        """Build a planner over CSV input files."""
        provider = CsvNetworkDataProvider(
            airports_path=airports_path,
            directions_path=directions_path,
            weather_path=weather_path,
            missions_path=missions_path,
        )
        return cls(provider, search_timeout=search_timeout)

    @classmethod
    def from_settings(cls, settings: Settings) -> "PlanMissions":
        """
        Build a planner from Settings.

        Raises:
            ValueError: If an input file setting is missing.
        """
        if not settings.has_network_files:
            raise ValueError(
                "Airports, directions and weather files must all be configured"
            )
        return cls.from_files(
            airports_path=settings.airports_file,
            directions_path=settings.directions_file,
            weather_path=settings.weather_file,
            missions_path=settings.missions_file,
            search_timeout=settings.search_timeout,
        )

    def route(self, origin: str, destination: str, timestamp: int) -> RouteResult:
        """
        Find the cheapest route for one request.

        Raises:
            UnknownAirportError: If origin or destination is not known.
        """
        return self._service.find_cheapest_path(origin, destination, timestamp)

    def plan(self, requests: List[RouteRequest]) -> List[RouteResult]:
        """Answer a batch of requests, one result per request, in order."""
        return self._service.plan_missions(requests)

    def load_missions(self) -> List[RouteRequest]:
        """Read the route requests from the data provider."""
        return requests_from_frame(self._data_provider.get_route_requests_df())

    def run(self, sink: ResultSink) -> List[RouteResult]:
        """
        Plan every mission from the data provider and write results to sink.

        The sink is closed afterwards.
        """
        requests = self.load_missions()
        with sink:
            return self._service.run_missions(requests, sink)

    def run_to_file(
        self, output_path: PathLike, flush_interval: int = 1000
    ) -> List[RouteResult]:
        """Plan every mission and write the result lines to output_path."""
        return self.run(TextFileResultSink(output_path, flush_interval=flush_interval))

    def get_available_airports(self) -> frozenset[str]:
        """
        Get all airport codes in the network.

        Returns:
            Frozenset of airport codes.
        """
        return self._network_repo.get_network().airports.codes

    def has_route(self, origin: str, destination: str) -> bool:
        """Check if a direct flight exists between two airports."""
        return self._network_repo.get_network().graph.has_route(origin, destination)

    def load(self) -> None:
        """Build the network now instead of on the first request."""
        self._network_repo.get_network()

    @property
    def is_ready(self) -> bool:
        """Check if the planner has built its network."""
        return self._service.is_ready

    @property
    def algorithm_name(self) -> str:
        """Get the name of the routing algorithm being used."""
        return self._service.algorithm_name

