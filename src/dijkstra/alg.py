"""
Single-target Dijkstra search for the cheapest chain of direct flights.

The search works on plain airport codes: the caller supplies the adjacency
mapping and a leg cost callable, so weather and distance stay outside the
algorithm.
"""

import heapq
import itertools
import logging
import time
from typing import Callable, Dict, List, Mapping, Optional, Sequence, Tuple

from .exceptions import SearchTimeoutError
from .labels import Label
from .validation import validate_dijkstra_inputs, validate_leg_cost

logger = logging.getLogger(__name__)

LegCost = Callable[[str, str], float]


def dijkstra(
    adjacency: Mapping[str, Sequence[str]],
    leg_cost: LegCost,
    origin: str,
    destination: str,
    timeout: Optional[float] = None,
) -> Optional[Label]:
    """
    Find the least-cost path from origin to destination.

    Ties between equal tentative costs are broken by insertion order:
    the frontier is keyed by (cost, sequence), and an equal-cost candidate
    never replaces an existing predecessor.

    Args:
        adjacency: Mapping of airport code to ordered direct destinations.
        leg_cost: Callable returning the non-negative cost of one leg.
        origin: Starting airport code.
        destination: Target airport code.
        timeout: Optional wall-clock budget in seconds.

    Returns:
        Terminal Label at the destination (follow prev back to origin),
        or None when the frontier is exhausted without reaching it.

    Raises:
        InvalidAirportError: If origin or destination is not in the graph.
        NegativeLegCostError: If leg_cost returns a negative weight.
        SearchTimeoutError: If the search runs past the timeout.
    """
    validate_dijkstra_inputs(adjacency, origin, destination)

    deadline = time.monotonic() + timeout if timeout is not None else None

    best_cost: Dict[str, float] = {airport: float("inf") for airport in adjacency}
    best_cost[origin] = 0.0

    sequence = itertools.count()
    start_label = Label(airport=origin, cost=0.0)
    pq: List[Tuple[float, int, Label]] = [(0.0, next(sequence), start_label)]

    expanded = 0

    while pq:
        curr_cost, _, label = heapq.heappop(pq)

        # Superseded by a cheaper label pushed later
        if curr_cost > best_cost[label.airport]:
            continue

        if label.airport == destination:
            logger.debug(
                "Reached %s from %s at cost %.5f after expanding %d airports",
                destination,
                origin,
                curr_cost,
                expanded,
            )
            return label

        if deadline is not None and time.monotonic() > deadline:
            raise SearchTimeoutError(timeout, expanded)

        expanded += 1

        for neighbor in adjacency.get(label.airport, ()):
            cost = leg_cost(label.airport, neighbor)
            validate_leg_cost(label.airport, neighbor, cost)

            candidate = curr_cost + cost
            if candidate < best_cost.get(neighbor, float("inf")):
                best_cost[neighbor] = candidate
                new_label = Label(airport=neighbor, cost=candidate, prev=label)
                heapq.heappush(pq, (candidate, next(sequence), new_label))

    logger.debug(
        "Frontier exhausted: no route from %s to %s (%d airports expanded)",
        origin,
        destination,
        expanded,
    )
    return None
