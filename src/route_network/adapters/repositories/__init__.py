"""
Repository adapters for the loaded route network.
"""

from src.route_network.adapters.repositories.network_graph_repo import (
    LOAD_ORDER,
    NetworkGraphRepository,
    RouteNetwork,
    build_network,
)

__all__ = [
    "LOAD_ORDER",
    "NetworkGraphRepository",
    "RouteNetwork",
    "build_network",
]
