"""
Route Finder port interface.

Defines the abstract contract for path search algorithms.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from src.route_network.adapters.repositories.network_graph_repo import (
        RouteNetwork,
    )
    from src.route_network.schemas.path import PathResult


class RouteFinder(ABC):
    """
    Abstract interface for path search algorithms.

    Algorithm adapters receive the frozen RouteNetwork and must keep all
    per-search state local to the call, so one instance can serve
    concurrent queries.

    Implementations:
    - DepthFirstRouteFinder: depth-first search with branch-and-bound pruning
    """

    @abstractmethod
    def find_route(
        self,
        network: RouteNetwork,
        origin: str,
        destination: str,
    ) -> PathResult:
        """
        Find a path from origin to destination.

        Args:
            network: Loaded, frozen route network.
            origin: Origin airport IATA code.
            destination: Destination airport IATA code.

        Returns:
            PathResult describing the path found.

        Raises:
            QueryInputError: If the pair is rejected before searching.
            NoRouteFoundError: If no path connects the pair.
        """
        ...

    @property
    @abstractmethod
    def name(self) -> str:
        """
        Algorithm identifier.

        Returns:
            Human-readable algorithm name.
        """
        ...
