"""
Port interfaces for the Airline Router.

Ports define the abstract interfaces that the domain layer uses to
communicate with external systems. This follows the Ports and Adapters
(Hexagonal) architecture pattern.
"""

from src.airline_router.ports.network_data_provider import NetworkDataProvider
from src.airline_router.ports.result_sink import ResultSink
from src.airline_router.ports.route_finder import RouteFinder

__all__ = [
    "NetworkDataProvider",
    "ResultSink",
    "RouteFinder",
]
