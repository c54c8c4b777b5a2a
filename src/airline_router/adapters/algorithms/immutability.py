"""
Immutability utilities for network protection.

Provides functions to enforce read-only access to the shared airline
network, so that no search can mutate the structures other searches read.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from src.airline_router.adapters.repositories.network_repo import AirlineNetwork


def make_immutable(network: AirlineNetwork) -> AirlineNetwork:
    """
    Make every structure of the network read-only.

    Idempotent and zero-copy: the same objects are frozen in place.
    Any later add/record call raises ReadOnlyNetworkError.

    Args:
        network: Network to protect.

    Returns:
        The same network with frozen directory, weather table and graph.
    """
    if not network.airports.is_frozen:
        network.airports.freeze()
    if not network.weather.is_frozen:
        network.weather.freeze()
    if not network.graph.is_frozen:
        network.graph.freeze()
    return network


def is_immutable(network: AirlineNetwork) -> bool:
    """
    Check if the network is read-only.

    Returns:
        True if the directory, weather table and graph are all frozen.
    """
    return (
        network.airports.is_frozen
        and network.weather.is_frozen
        and network.graph.is_frozen
    )
