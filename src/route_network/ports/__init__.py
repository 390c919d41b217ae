"""
Port interfaces for the Route Network.

Ports define the abstract interfaces (ABCs and Protocols) that the domain
layer uses to communicate with external systems. This follows the
Ports and Adapters (Hexagonal) architecture pattern.
"""

from src.route_network.ports.graph_repository import (
    GraphNotInitializedError,
    NetworkRepository,
)
from src.route_network.ports.network_data_provider import (
    NetworkDataProvider,
    RecordSource,
)
from src.route_network.ports.route_finder import RouteFinder

__all__ = [
    "GraphNotInitializedError",
    "NetworkDataProvider",
    "NetworkRepository",
    "RecordSource",
    "RouteFinder",
]
