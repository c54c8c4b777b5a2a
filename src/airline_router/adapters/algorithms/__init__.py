"""
Algorithm adapters for airline routing.
"""

from src.airline_router.adapters.algorithms.dijkstra_adapter import (
    DijkstraRouteFinder,
)
from src.airline_router.adapters.algorithms.immutability import (
    is_immutable,
    make_immutable,
)

__all__ = [
    "DijkstraRouteFinder",
    "is_immutable",
    "make_immutable",
]
