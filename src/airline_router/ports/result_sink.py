"""
Result Sink port interface.

Defines where route results go once a request has been answered.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Iterable

if TYPE_CHECKING:
    from src.airline_router.schemas.route import RouteResult


class ResultSink(ABC):
    """
    Abstract interface for result sinks.

    Sinks receive exactly one result per request, in request order.
    """

    @abstractmethod
    def write(self, result: RouteResult) -> None:
        """Record a single result."""
        ...

    def write_all(self, results: Iterable[RouteResult]) -> int:
        """Record results in order and return how many were written."""
        count = 0
        for result in results:
            self.write(result)
            count += 1
        return count

    def close(self) -> None:
        """Release resources. Default implementation does nothing."""
        return None

    def __enter__(self) -> "ResultSink":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
