"""
Depth-First Algorithm Adapter - Bridge between architecture and algorithm.

Wraps the pathfinder search with immutability safety and converts its
SearchResult to the PathResult schema object.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from src.pathfinder.search import find_path
from src.route_network.adapters.algorithms.immutability import (
    freeze_airports,
    is_frozen,
)
from src.route_network.ports.route_finder import RouteFinder
from src.route_network.schemas.path import PathResult

if TYPE_CHECKING:
    from src.route_network.adapters.repositories.network_graph_repo import (
        RouteNetwork,
    )

logger = logging.getLogger(__name__)


class DepthFirstRouteFinder(RouteFinder):
    """
    Adapter for the pathfinder depth-first search.

    Each call gets its own search context inside find_path, so one
    instance is safe to share between concurrent queries.
    """

    @property
    def name(self) -> str:
        """Algorithm identifier."""
        return "Depth-First Branch and Bound"

    def find_route(
        self,
        network: RouteNetwork,
        origin: str,
        destination: str,
    ) -> PathResult:
        """
        Find a path with the depth-first engine.

        Args:
            network: Loaded route network.
            origin: Origin airport.
            destination: Destination airport.

        Returns:
            PathResult for the best path found.

        Raises:
            QueryInputError: If the pair is rejected.
            NoRouteFoundError: If no path is found.
        """
        airports = network.airports
        if not is_frozen(airports):
            logger.debug("Freezing airport collection before search")
            airports = freeze_airports(airports)

        result = find_path(airports, origin, destination)

        logger.debug(
            "Depth-first search expanded %d airports for %s -> %s",
            result.expansions,
            origin,
            destination,
        )

        return PathResult.from_airports(
            airports=result.airports,
            distance=result.distance,
            expansions=result.expansions,
            algorithm=self.name,
        )
