"""
Route Finder port interface.

Defines the abstract contract for routing algorithms.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from src.airline_router.adapters.repositories.network_repo import AirlineNetwork
    from src.airline_router.schemas.route import RouteRequest, RouteResult


class RouteFinder(ABC):
    """
    Abstract interface for route finding algorithms.

    Algorithm adapters receive the full, frozen AirlineNetwork and one
    request; they never mutate the network.

    Implementations:
    - DijkstraRouteFinder: single-target Dijkstra over weather-weighted legs
    """

    @abstractmethod
    def find_route(
        self,
        network: AirlineNetwork,
        request: RouteRequest,
    ) -> RouteResult:
        """
        Find the cheapest sequence of direct flights for one request.

        Args:
            network: Frozen airports, weather and flight graph.
            request: Origin, destination and the fixed timestamp.

        Returns:
            RouteResult with status FOUND or NO_ROUTE.

        Raises:
            UnknownAirportError: If origin or destination is not known.
        """
        ...

    @property
    @abstractmethod
    def name(self) -> str:
        """
        Algorithm identifier.

        Returns:
            Human-readable algorithm name.
        """
        ...
