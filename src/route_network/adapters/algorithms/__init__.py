"""
Algorithm adapters for route search.
"""

from src.route_network.adapters.algorithms.depth_first_adapter import (
    DepthFirstRouteFinder,
)
from src.route_network.adapters.algorithms.immutability import (
    freeze_airports,
    is_frozen,
)

__all__ = [
    "DepthFirstRouteFinder",
    "freeze_airports",
    "is_frozen",
]
