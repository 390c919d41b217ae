"""
Route Finder Service - Domain orchestrator for route search.

Coordinates the interaction between:
- NetworkGraphRepository (loaded route network)
- RouteFinder (algorithm adapter)
- RouteQuery (validated search parameters)
"""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING, Optional

from src.pathfinder.exceptions import NoRouteFoundError, QueryInputError
from src.route_network.schemas.path import PathResult
from src.route_network.schemas.query import RouteQuery

if TYPE_CHECKING:
    from src.route_network.ports.graph_repository import NetworkRepository
    from src.route_network.ports.route_finder import RouteFinder

logger = logging.getLogger(__name__)


class RouteFinderService:
    """
    Domain service for finding a path between two airports.

    Orchestrates the search:
    1. Validates the request parameters
    2. Retrieves the loaded network (non-blocking after load)
    3. Delegates the search to the algorithm adapter
    4. Logs the outcome and timing

    This service is stateless and thread-safe.

    Attributes:
        _graph_repo: Repository providing the route network.
        _route_finder: Algorithm adapter.
    """

    def __init__(
        self,
        graph_repo: NetworkRepository,
        route_finder: RouteFinder,
    ) -> None:
        """
        Initialize the route finder service.

        Args:
            graph_repo: Repository for the loaded network.
            route_finder: Algorithm adapter (e.g., DepthFirstRouteFinder).
        """
        self._graph_repo = graph_repo
        self._route_finder = route_finder

    def find_route(
        self,
        origin: Optional[str],
        destination: Optional[str],
    ) -> PathResult:
        """
        Find a path from origin to destination.

        Args:
            origin: Origin airport IATA code (e.g., 'YYZ').
            destination: Destination airport IATA code.

        Returns:
            PathResult for the path found.

        Raises:
            InvalidQueryParametersError: If a code is missing.
            SameOriginDestinationError: If origin equals destination.
            InvalidOriginError: If origin is unknown.
            InvalidDestinationError: If destination is unknown.
            NoRouteFoundError: If no path connects the pair.
            GraphNotInitializedError: If the network is not loaded.
        """
        start_time = time.perf_counter()

        query = RouteQuery.create(origin=origin, destination=destination)
        network = self._graph_repo.get_network()

        try:
            result = self._route_finder.find_route(
                network=network,
                origin=query.origin,
                destination=query.destination,
            )
        except (QueryInputError, NoRouteFoundError) as e:
            logger.info(
                "Route search %s -> %s rejected: %s (%.3fms)",
                query.origin,
                query.destination,
                e,
                (time.perf_counter() - start_time) * 1000,
            )
            raise

        logger.info(
            "Route search %s -> %s completed: %s, distance %.4f, "
            "%d airports expanded in %.3fms",
            query.origin,
            query.destination,
            result.path,
            result.distance,
            result.expansions,
            (time.perf_counter() - start_time) * 1000,
        )

        return result

    @property
    def algorithm_name(self) -> str:
        """Get name of the underlying algorithm."""
        return self._route_finder.name

    @property
    def is_ready(self) -> bool:
        """Check if service is ready to handle requests."""
        return self._graph_repo.is_initialized
