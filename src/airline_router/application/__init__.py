"""
Application layer for the Airline Router.

This layer provides the public API for the routing engine.
It acts as a facade, handling dependency initialization and providing
a simple interface for consumers.
"""

from src.airline_router.application.plan_missions import PlanMissions

__all__ = ["PlanMissions"]
