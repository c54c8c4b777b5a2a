"""
Airport Directory - append-only lookup of airports by code.
"""

from __future__ import annotations

from typing import Dict, Iterable, Iterator, Optional

from src.airline_router.exceptions import (
    DuplicateAirportError,
    ReadOnlyNetworkError,
    UnknownAirportError,
)
from src.airline_router.schemas.airport import Airport


class AirportDirectory:
    """
    All known airports keyed by their unique code.

    Duplicate codes are rejected. There is no removal; after freeze()
    the directory is read-only for the rest of the process lifetime.
    """

    def __init__(self, airports: Iterable[Airport] = ()) -> None:
        self._airports: Dict[str, Airport] = {}
        self._frozen = False
        for airport in airports:
            self.add(airport)

    def add(self, airport: Airport) -> None:
        """
        Register an airport.

        Raises:
            DuplicateAirportError: If the code is already registered.
            ReadOnlyNetworkError: If the directory has been frozen.
        """
        if self._frozen:
            raise ReadOnlyNetworkError("AirportDirectory is frozen")
        if airport.code in self._airports:
            raise DuplicateAirportError(airport.code)
        self._airports[airport.code] = airport

    def get(self, code: str) -> Optional[Airport]:
        """Return the airport for code, or None if unknown."""
        return self._airports.get(code)

    def require(self, code: str, context: str = "airport directory") -> Airport:
        """
        Return the airport for code.

        Raises:
            UnknownAirportError: If code is not registered.
        """
        airport = self._airports.get(code)
        if airport is None:
            raise UnknownAirportError(code, context)
        return airport

    def freeze(self) -> "AirportDirectory":
        """Make the directory read-only and return it."""
        self._frozen = True
        return self

    @property
    def is_frozen(self) -> bool:
        return self._frozen

    @property
    def codes(self) -> frozenset[str]:
        """All registered airport codes."""
        return frozenset(self._airports)

    def __contains__(self, code: object) -> bool:
        return code in self._airports

    def __iter__(self) -> Iterator[Airport]:
        return iter(self._airports.values())

    def __len__(self) -> int:
        return len(self._airports)
