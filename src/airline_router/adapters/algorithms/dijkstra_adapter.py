"""
Dijkstra Algorithm Adapter - Bridge between architecture and algorithm.

Wraps the dijkstra module with immutability safety, feeds it the
weather-weighted leg cost for the request's timestamp, and converts the
terminal Label to a RouteResult.
"""

import logging
from typing import Optional

from src.dijkstra.alg import dijkstra
from src.dijkstra.exceptions import InvalidAirportError
from src.dijkstra.reconstruction import reconstruct_path

from src.airline_router.adapters.algorithms.immutability import make_immutable
from src.airline_router.adapters.repositories.network_repo import AirlineNetwork
from src.airline_router.exceptions import UnknownAirportError
from src.airline_router.ports.route_finder import RouteFinder
from src.airline_router.schemas.route import RouteRequest, RouteResult
from src.airline_router.services.cost_model import CostModel

logger = logging.getLogger(__name__)


class DijkstraRouteFinder(RouteFinder):
    """
    Adapter for the dijkstra module with IMMUTABILITY ENFORCEMENT.

    This adapter ensures:
    1. The network is frozen before the algorithm reads it
    2. Unknown airports fail the request before any search
    3. The reported cost is recomputed leg by leg from the returned path

    Attributes:
        _timeout: Optional per-search deadline in seconds.
    """

    def __init__(self, timeout: Optional[float] = None) -> None:
        """
        Initialize the Dijkstra route finder.

        Args:
            timeout: Optional wall-clock budget per search, in seconds.
                None (default) means no deadline.
        """
        if timeout is not None and timeout <= 0:
            raise ValueError(f"timeout must be > 0, got {timeout}")
        self._timeout = timeout

    @property
    def name(self) -> str:
        """Algorithm identifier."""
        return "Weather-Weighted Dijkstra"

    def find_route(self, network: AirlineNetwork, request: RouteRequest) -> RouteResult:
        """
        Find the cheapest route for one request.

        Args:
            network: Airline network (frozen here if it is not already).
            request: Origin, destination and fixed timestamp.

        Returns:
            FOUND result with the airport sequence and per-leg breakdown,
            or NO_ROUTE when the destination is unreachable.

        Raises:
            UnknownAirportError: If origin or destination is not in the directory.
        """
        network = make_immutable(network)
        directory = network.airports

        origin = directory.require(request.origin, "route request")
        destination = directory.require(request.destination, "route request")

        if origin.code == destination.code:
            return RouteResult.from_legs(request, airports=[origin.code], legs=[])

        cost_model = CostModel(network.weather)
        timestamp = request.timestamp

        def leg_cost(from_code: str, to_code: str) -> float:
            return cost_model.leg_cost(
                directory.require(from_code), directory.require(to_code), timestamp
            )

        try:
            label = dijkstra(
                adjacency=network.graph.adjacency(),
                leg_cost=leg_cost,
                origin=origin.code,
                destination=destination.code,
                timeout=self._timeout,
            )
        except InvalidAirportError as e:
            raise UnknownAirportError(e.airport, "flight graph") from e

        if label is None:
            logger.debug(
                "No route from %s to %s at t=%d",
                request.origin,
                request.destination,
                timestamp,
            )
            return RouteResult.no_route(request)

        path = [directory.require(code) for code in reconstruct_path(label)]
        legs = cost_model.legs(path, timestamp)
        result = RouteResult.from_legs(
            request, airports=[airport.code for airport in path], legs=legs
        )

        logger.debug(
            "Route %s at t=%d: %d legs, cost %.5f (search cost %.5f)",
            " -> ".join(result.airports),
            timestamp,
            result.num_legs,
            result.total_cost,
            label.cost,
        )
        return result
