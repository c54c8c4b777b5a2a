from functools import lru_cache
from typing import List, Optional

from dotenv import load_dotenv
from fastapi import Depends, FastAPI, HTTPException
from pydantic import BaseModel, ConfigDict, Field

# Load environment variables from .env file
load_dotenv()

from src.airline_router.application import PlanMissions
from src.airline_router.config import Settings
from src.airline_router.exceptions import NetworkNotInitializedError, UnknownAirportError
from src.airline_router.schemas.route import RouteRequest, RouteResult
from src.dijkstra.exceptions import SearchTimeoutError

app = FastAPI(title="Airline Routing API")


@lru_cache(maxsize=1)
def get_planner() -> PlanMissions:
    """Planner built from AIRLINE_ROUTER_* settings, shared by all requests."""
    settings = Settings.from_env(dotenv=False)
    if not settings.has_network_files:
        raise HTTPException(status_code=503, detail="Airline network files are not configured")
    return PlanMissions.from_settings(settings)


# --- Pydantic Schemas (The JSON Contract) ---
# We define these so the API includes the @property fields in the response.


class RouteLegSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)  # Allows reading from dataclasses

    leg_index: int
    departure_airport: str
    arrival_airport: str
    distance_km: float
    departure_multiplier: float
    arrival_multiplier: float
    weather_penalty: float  # This captures the @property
    cost: float


class RouteResponse(BaseModel):
    origin: str
    destination: str
    timestamp: int
    status: str
    found: bool
    airports: List[str]
    legs: List[RouteLegSchema]
    total_cost: float
    total_distance_km: float
    line: str
    error: Optional[str] = None

    @classmethod
    def from_result(cls, result: RouteResult) -> "RouteResponse":
        return cls(
            origin=result.request.origin,
            destination=result.request.destination,
            timestamp=result.request.timestamp,
            status=result.status.value,
            found=result.found,
            airports=result.route_codes,
            legs=[RouteLegSchema.model_validate(leg) for leg in result.legs],
            total_cost=result.total_cost,
            total_distance_km=result.total_distance_km,
            line=result.to_line(),
            error=result.error,
        )


class RouteQuery(BaseModel):
    origin: str = Field(min_length=1)
    destination: str = Field(min_length=1)
    timestamp: int

    def to_request(self) -> RouteRequest:
        return RouteRequest(
            origin=self.origin, destination=self.destination, timestamp=self.timestamp
        )


# --- API Endpoints ---


@app.get("/health")
def health(planner: PlanMissions = Depends(get_planner)):
    return {
        "status": "ok",
        "ready": planner.is_ready,
        "algorithm": planner.algorithm_name,
    }


@app.get("/airports", response_model=List[str])
def list_airports(planner: PlanMissions = Depends(get_planner)):
    try:
        return sorted(planner.get_available_airports())
    except NetworkNotInitializedError as e:
        raise HTTPException(status_code=503, detail=str(e))


@app.post("/route", response_model=RouteResponse)
def find_route(query: RouteQuery, planner: PlanMissions = Depends(get_planner)):
    """
    Cheapest route for one request.

    A missing route is a normal answer (found=false), not an error.
    Unknown airports answer 404.
    """
    try:
        result = planner.route(query.origin, query.destination, query.timestamp)
    except UnknownAirportError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except SearchTimeoutError as e:
        raise HTTPException(status_code=504, detail=str(e))
    except NetworkNotInitializedError as e:
        raise HTTPException(status_code=503, detail=str(e))

    return RouteResponse.from_result(result)


@app.post("/missions", response_model=List[RouteResponse])
def plan_missions(queries: List[RouteQuery], planner: PlanMissions = Depends(get_planner)):
    """Answer a batch in order; invalid requests come back with status 'invalid'."""
    try:
        results = planner.plan([query.to_request() for query in queries])
    except NetworkNotInitializedError as e:
        raise HTTPException(status_code=503, detail=str(e))

    return [RouteResponse.from_result(result) for result in results]
