"""
Flight Graph - directed adjacency of permitted direct flights.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Dict, List, Mapping, Optional

from src.airline_router.adapters.repositories.airport_directory import AirportDirectory
from src.airline_router.exceptions import ReadOnlyNetworkError
from src.airline_router.schemas.airport import Airport


class FlightGraph:
    """
    Directed graph of direct flights between airports of one directory.

    Adjacency lists keep insertion order and duplicates; the order only
    matters for deterministic tie-breaking in searches.

    Attributes:
        _directory: Directory every edge endpoint must belong to.
        _adjacency: Dict mapping origin code to ordered destination codes.
    """

    def __init__(self, directory: AirportDirectory) -> None:
        self._directory = directory
        self._adjacency: Dict[str, List[str]] = {
            airport.code: [] for airport in directory
        }
        self._frozen = False
        self._snapshot: Optional[Mapping[str, tuple[str, ...]]] = None

    def add_edge(self, from_code: str, to_code: str) -> None:
        """
        Append a direct flight from_code -> to_code.

        Raises:
            UnknownAirportError: If either endpoint is not in the directory.
            ReadOnlyNetworkError: If the graph has been frozen.
        """
        if self._frozen:
            raise ReadOnlyNetworkError("FlightGraph is frozen")
        origin = self._directory.require(from_code, "flight directions")
        destination = self._directory.require(to_code, "flight directions")

        self._adjacency.setdefault(origin.code, []).append(destination.code)
        self._adjacency.setdefault(destination.code, [])

    def neighbors(self, code: str) -> tuple[Airport, ...]:
        """Airports directly reachable from code, in insertion order."""
        return tuple(
            self._directory.require(dest) for dest in self._adjacency.get(code, ())
        )

    def neighbor_codes(self, code: str) -> tuple[str, ...]:
        """Codes directly reachable from code, in insertion order."""
        return tuple(self._adjacency.get(code, ()))

    def has_route(self, from_code: str, to_code: str) -> bool:
        """Check if a direct flight exists."""
        return to_code in self._adjacency.get(from_code, ())

    def adjacency(self) -> Mapping[str, tuple[str, ...]]:
        """Snapshot of the code-level adjacency, as consumed by the search."""
        if self._snapshot is not None:
            return self._snapshot
        return {code: tuple(dests) for code, dests in self._adjacency.items()}

    def freeze(self) -> "FlightGraph":
        """Make the graph read-only and return it."""
        self._frozen = True
        self._snapshot = MappingProxyType(
            {code: tuple(dests) for code, dests in self._adjacency.items()}
        )
        return self

    @property
    def is_frozen(self) -> bool:
        return self._frozen

    @property
    def directory(self) -> AirportDirectory:
        return self._directory

    @property
    def airports(self) -> frozenset[str]:
        """All node codes."""
        return frozenset(self._adjacency)

    @property
    def edge_count(self) -> int:
        """Number of edges, duplicates included."""
        return sum(len(dests) for dests in self._adjacency.values())
