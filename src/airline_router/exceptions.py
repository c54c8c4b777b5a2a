"""
Error taxonomy for the airline router.

Load-phase and request-phase failures are scoped to the single record or
request that triggered them; none of these terminate a batch on their own.
"""

from typing import Optional


class AirlineRouterError(Exception):
    """Base exception for all airline router errors."""

    pass


class UnknownAirportError(AirlineRouterError, LookupError):
    """Raised when an edge or a route request references an unknown code."""

    def __init__(self, code: str, context: str = "airport directory") -> None:
        self.code = code
        self.context = context
        message = f"Airport '{code}' not found in {context}"
        super().__init__(message)


class DuplicateAirportError(AirlineRouterError):
    """Raised when an airport code is added to the directory twice."""

    def __init__(self, code: str) -> None:
        self.code = code
        super().__init__(f"Airport '{code}' is already registered")


class InvalidWeatherCodeError(AirlineRouterError, ValueError):
    """Raised when a weather observation carries a negative code."""

    def __init__(self, code: int) -> None:
        self.code = code
        super().__init__(f"Weather code must be a non-negative integer, got {code!r}")


class MalformedRecordError(AirlineRouterError):
    """Raised by loaders when a tabular input cannot be parsed or validated."""

    def __init__(self, source: str, detail: Optional[str] = None) -> None:
        self.source = source
        self.detail = detail
        message = f"Malformed records in {source}"
        if detail:
            message += f": {detail}"
        super().__init__(message)


class ReadOnlyNetworkError(AirlineRouterError, RuntimeError):
    """Raised when a frozen network structure is mutated."""

    pass


class NetworkNotInitializedError(AirlineRouterError):
    """Raised when the airline network cannot be built from its provider."""

    pass
