"""
Custom exceptions for the dijkstra module.

Provides a hierarchy of exceptions for clear error handling
and debugging of least-cost route searches.
"""


class DijkstraError(Exception):
    """Base exception for all dijkstra module errors."""

    pass


class ValidationError(DijkstraError):
    """Base exception for input validation errors."""

    pass


class InvalidAirportError(ValidationError):
    """Raised when an airport code is not a node of the searched graph."""

    def __init__(self, airport: str, context: str = "graph") -> None:
        self.airport = airport
        message = f"Airport '{airport}' not found in {context}"
        super().__init__(message)


class NegativeLegCostError(ValidationError):
    """Raised when the leg cost function returns a negative weight."""

    def __init__(self, origin: str, destination: str, cost: float) -> None:
        self.origin = origin
        self.destination = destination
        self.cost = cost
        message = (
            f"Leg {origin} -> {destination} has negative cost {cost!r}; "
            "Dijkstra requires non-negative weights"
        )
        super().__init__(message)


class SearchTimeoutError(DijkstraError):
    """Raised when a search runs past its deadline."""

    def __init__(self, timeout: float, expanded: int) -> None:
        self.timeout = timeout
        self.expanded = expanded
        message = f"Search exceeded {timeout:.3f}s after expanding {expanded} airports"
        super().__init__(message)
