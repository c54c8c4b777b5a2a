"""
Input validation for the dijkstra module.

Provides validation functions that check inputs before algorithm execution,
ensuring fail-fast behavior with clear error messages.
"""

import math
from typing import Mapping, Sequence

from .exceptions import InvalidAirportError, NegativeLegCostError


def validate_airport_exists(
    airport: str,
    adjacency: Mapping[str, Sequence[str]],
    context: str = "graph",
) -> None:
    """
    Validate that an airport is a node of the adjacency mapping.

    Args:
        airport: Airport code to validate.
        adjacency: Mapping of airport code to directly reachable codes.
        context: Description for error message.

    Raises:
        InvalidAirportError: If airport is not found.
    """
    if airport not in adjacency:
        raise InvalidAirportError(airport, context)


def validate_leg_cost(origin: str, destination: str, cost: float) -> None:
    """
    Validate a single edge weight returned by the cost function.

    Raises:
        NegativeLegCostError: If cost is negative or NaN.
    """
    if math.isnan(cost) or cost < 0:
        raise NegativeLegCostError(origin, destination, cost)


def validate_dijkstra_inputs(
    adjacency: Mapping[str, Sequence[str]],
    origin: str,
    destination: str,
) -> None:
    """
    Validate all inputs for the dijkstra algorithm.

    Args:
        adjacency: Mapping of airport code to directly reachable codes.
        origin: Starting airport code.
        destination: Target airport code.

    Raises:
        InvalidAirportError: If origin or destination is not in the graph.
    """
    validate_airport_exists(origin, adjacency, "origin")
    validate_airport_exists(destination, adjacency, "destination")
