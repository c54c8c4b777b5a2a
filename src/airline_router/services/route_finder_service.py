"""
Route Finder Service - Domain orchestrator for airline routing.

Coordinates the interaction between:
- NetworkRepository (frozen airline network)
- RouteFinder (algorithm adapter)
- RouteRequest (validated search parameters)
"""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING, Iterable, List

from src.dijkstra.exceptions import SearchTimeoutError

from src.airline_router.exceptions import UnknownAirportError
from src.airline_router.schemas.route import RouteRequest, RouteResult, RouteStatus

if TYPE_CHECKING:
    import pandas as pd

    from src.airline_router.adapters.repositories.network_repo import NetworkRepository
    from src.airline_router.ports.result_sink import ResultSink
    from src.airline_router.ports.route_finder import RouteFinder

logger = logging.getLogger(__name__)


def requests_from_frame(missions_df: pd.DataFrame) -> List[RouteRequest]:
    """Convert a validated missions DataFrame into requests, keeping row order."""
    return [
        RouteRequest(origin=str(origin), destination=str(dest), timestamp=int(ts))
        for origin, dest, ts in zip(
            missions_df["from_code"], missions_df["to_code"], missions_df["timestamp"]
        )
    ]


class RouteFinderService:
    """
    Domain service for finding cheapest airline routes.

    Orchestrates the routing process:
    1. Builds the RouteRequest
    2. Retrieves the frozen network (built once)
    3. Delegates the search to the algorithm adapter
    4. Logs performance metrics

    This service is stateless and thread-safe.

    Attributes:
        _network_repo: Repository providing the airline network.
        _route_finder: Algorithm adapter for route finding.
    """

    def __init__(
        self,
        network_repo: NetworkRepository,
        route_finder: RouteFinder,
    ) -> None:
        """
        Initialize the route finder service.

        Args:
            network_repo: Repository for airline network access.
            route_finder: Algorithm adapter (e.g., DijkstraRouteFinder).
        """
        self._network_repo = network_repo
        self._route_finder = route_finder

    def find_cheapest_path(
        self,
        origin: str,
        destination: str,
        timestamp: int,
    ) -> RouteResult:
        """
        Find the cheapest route for a single request.

        Args:
            origin: Origin airport code.
            destination: Destination airport code.
            timestamp: Timestamp at which weather is evaluated for every leg.

        Returns:
            RouteResult with status FOUND or NO_ROUTE.

        Raises:
            UnknownAirportError: If origin or destination is not known.
            NetworkNotInitializedError: If the network cannot be built.
        """
        request = RouteRequest(origin=origin, destination=destination, timestamp=timestamp)
        return self.find_route(request)

    def find_route(self, request: RouteRequest) -> RouteResult:
        """Answer one RouteRequest (see find_cheapest_path)."""
        start_time = time.perf_counter()

        network = self._network_repo.get_network()
        result = self._route_finder.find_route(network, request)

        logger.debug(
            "Route search %s -> %s at t=%d: %s in %.3fms",
            request.origin,
            request.destination,
            request.timestamp,
            result.status.value,
            (time.perf_counter() - start_time) * 1000,
        )
        return result

    def plan_missions(self, requests: Iterable[RouteRequest]) -> List[RouteResult]:
        """
        Answer a batch of requests, one result per request, in order.

        An unknown airport or a timed-out search aborts only its own request,
        which is reported with status INVALID; the rest of the batch continues.
        """
        start_time = time.perf_counter()
        results: List[RouteResult] = []

        for request in requests:
            try:
                result = self.find_route(request)
            except UnknownAirportError as e:
                logger.warning(
                    "Invalid airport code(s) in mission: %s -> %s (%s)",
                    request.origin,
                    request.destination,
                    e,
                )
                result = RouteResult.invalid(request, str(e))
            except SearchTimeoutError as e:
                logger.warning(
                    "Search timed out for mission %s -> %s: %s",
                    request.origin,
                    request.destination,
                    e,
                )
                result = RouteResult.invalid(request, str(e))
            results.append(result)

        found = sum(1 for r in results if r.status is RouteStatus.FOUND)
        no_route = sum(1 for r in results if r.status is RouteStatus.NO_ROUTE)
        logger.info(
            "Planned %d missions in %.3fms: %d routed, %d without route, %d invalid",
            len(results),
            (time.perf_counter() - start_time) * 1000,
            found,
            no_route,
            len(results) - found - no_route,
        )
        return results

    def run_missions(
        self, requests: Iterable[RouteRequest], sink: ResultSink
    ) -> List[RouteResult]:
        """Plan a batch and write every result to sink, in request order."""
        results = self.plan_missions(requests)
        sink.write_all(results)
        return results

    @property
    def algorithm_name(self) -> str:
        """Get name of the underlying algorithm."""
        return self._route_finder.name

    @property
    def is_ready(self) -> bool:
        """Check if service is ready to handle requests."""
        return self._network_repo.is_initialized
