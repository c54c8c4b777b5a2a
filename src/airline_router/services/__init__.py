"""
Domain services for the Airline Router.

Services hold the leg cost model and orchestrate the interaction between
ports (repositories, algorithms, sinks) and route requests.
"""

from src.airline_router.services.cost_model import (
    BASE_LEG_COST,
    EARTH_RADIUS_KM,
    CostModel,
    great_circle_distance_km,
)
from src.airline_router.services.route_finder_service import (
    RouteFinderService,
    requests_from_frame,
)

__all__ = [
    "BASE_LEG_COST",
    "EARTH_RADIUS_KM",
    "CostModel",
    "RouteFinderService",
    "great_circle_distance_km",
    "requests_from_frame",
]
