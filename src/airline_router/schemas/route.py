"""
Route request and result schemas.

Defines the input contract for missions (route requests) and the output
contract shared by the route finder, the result sinks and the HTTP API.
"""

import enum
from dataclasses import dataclass
from typing import List, Optional, Sequence

import pandera as pa
from pandera.typing import DataFrame, Series

NO_ROUTE_LINE = "no route"
INVALID_REQUEST_LINE = "invalid request"


class RouteRequestSchema(pa.DataFrameModel):
    """Contract for the missions table: one row per route request."""

    from_code: Series[str] = pa.Field(
        nullable=False,
        description="Origin airport code",
    )
    to_code: Series[str] = pa.Field(
        nullable=False,
        description="Destination airport code",
    )
    timestamp: Series[int] = pa.Field(
        nullable=False,
        description="Timestamp at which every leg's weather is evaluated",
    )

    class Config:
        strict = False
        coerce = True
        name = "RouteRequestSchema"
        ordered = True


RouteRequestDataFrame = DataFrame[RouteRequestSchema]


@dataclass(frozen=True)
class RouteRequest:
    """
    Immutable route request (one mission).

    Attributes:
        origin: Origin airport code.
        destination: Destination airport code.
        timestamp: Fixed timestamp used for every leg of the route.
    """

    origin: str
    destination: str
    timestamp: int

    def __post_init__(self) -> None:
        """Validate request after initialization."""
        if not self.origin:
            raise ValueError("origin cannot be empty")
        if not self.destination:
            raise ValueError("destination cannot be empty")


class RouteStatus(str, enum.Enum):
    """Outcome of a single route request."""

    FOUND = "found"
    NO_ROUTE = "no_route"
    INVALID = "invalid"


@dataclass(frozen=True)
class RouteLeg:
    """
    Immutable breakdown of one direct flight in a route.

    cost == 300 * departure_multiplier * arrival_multiplier + distance_km
    """

    leg_index: int
    departure_airport: str
    arrival_airport: str
    distance_km: float
    departure_multiplier: float
    arrival_multiplier: float
    cost: float

    @property
    def weather_penalty(self) -> float:
        """Combined weather multiplier applied to the base leg cost."""
        return self.departure_multiplier * self.arrival_multiplier


@dataclass(frozen=True)
class RouteResult:
    """
    Immutable result of a route request.

    A found route holds at least one airport; a route from an airport to
    itself holds exactly one airport and no legs.
    """

    request: RouteRequest
    status: RouteStatus
    airports: tuple[str, ...] = ()
    legs: tuple[RouteLeg, ...] = ()
    error: Optional[str] = None

    @property
    def found(self) -> bool:
        """True when a path from origin to destination exists."""
        return self.status is RouteStatus.FOUND

    @property
    def total_cost(self) -> float:
        """Sum of all leg costs (0.0 for a single-airport route)."""
        return float(sum(leg.cost for leg in self.legs))

    @property
    def total_distance_km(self) -> float:
        """Sum of all leg great-circle distances."""
        return float(sum(leg.distance_km for leg in self.legs))

    @property
    def num_legs(self) -> int:
        """Number of direct flights in the route."""
        return len(self.legs)

    @property
    def route_codes(self) -> List[str]:
        """Ordered list of airport codes in the route."""
        return list(self.airports)

    def to_line(self) -> str:
        """
        Render the result as one line of mission output.

        Returns:
            'A B C 123.45678' for a found route, 'no route' or
            'invalid request' otherwise.
        """
        if self.status is RouteStatus.NO_ROUTE:
            return NO_ROUTE_LINE
        if self.status is RouteStatus.INVALID:
            return INVALID_REQUEST_LINE
        return f"{' '.join(self.airports)} {self.total_cost:.5f}"

    @classmethod
    def from_legs(
        cls,
        request: RouteRequest,
        airports: Sequence[str],
        legs: Sequence[RouteLeg],
    ) -> "RouteResult":
        """
        Factory method to create a found RouteResult.

        Raises:
            ValueError: If airports is empty or legs do not chain airports.
        """
        if not airports:
            raise ValueError("Route must have at least one airport")
        if len(legs) != len(airports) - 1:
            raise ValueError(
                f"Route with {len(airports)} airports needs {len(airports) - 1} legs, "
                f"got {len(legs)}"
            )
        return cls(
            request=request,
            status=RouteStatus.FOUND,
            airports=tuple(airports),
            legs=tuple(legs),
        )

    @classmethod
    def no_route(cls, request: RouteRequest) -> "RouteResult":
        """Result for a request whose destination is unreachable."""
        return cls(request=request, status=RouteStatus.NO_ROUTE)

    @classmethod
    def invalid(cls, request: RouteRequest, error: str) -> "RouteResult":
        """Result for a request that could not be searched."""
        return cls(request=request, status=RouteStatus.INVALID, error=error)
