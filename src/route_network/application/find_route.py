"""
FindRoute Use Case - Public API for route lookups.

This module provides the main entry point for the route network engine.
It acts as a Facade/Factory, handling dependency initialization and
providing a clean interface for consumers.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Union

from src.pathfinder.decoders import SKIP_UNKNOWN_AIRPORTS
from src.route_network.adapters.algorithms.depth_first_adapter import (
    DepthFirstRouteFinder,
)
from src.route_network.adapters.data_providers.csv_provider import (
    CsvDirectoryProvider,
)
from src.route_network.adapters.repositories.network_graph_repo import (
    NetworkGraphRepository,
    RouteNetwork,
)
from src.route_network.ports.network_data_provider import NetworkDataProvider
from src.route_network.ports.route_finder import RouteFinder
from src.route_network.schemas.path import PathResult
from src.route_network.services.route_finder_service import RouteFinderService

logger = logging.getLogger(__name__)

DEFAULT_DATA_DIR = "data"


class FindRoute:
    """
    Public API for finding a path between two airports.

    Example usage:
        >>> router = FindRoute(data_dir="data")
        >>> router.load()
        >>> router.lookup("YYZ", "JFK")
        'YYZ->JFK'

    Attributes:
        _service: Underlying RouteFinderService.
        _graph_repo: Network repository.
    """

    def __init__(
        self,
        data_dir: Optional[Union[str, Path]] = None,
        data_provider: Optional[NetworkDataProvider] = None,
        route_finder: Optional[RouteFinder] = None,
        unknown_airports: str = SKIP_UNKNOWN_AIRPORTS,
        auto_load: bool = True,
    ) -> None:
        """
        Initialize the router with optional custom dependencies.

        Nothing is read until load() or the first search.

        Args:
            data_dir: Directory with the CSV sources. Defaults to data/.
            data_provider: Custom data provider. If None, uses CsvDirectoryProvider.
            route_finder: Custom algorithm. If None, uses DepthFirstRouteFinder.
            unknown_airports: Policy for routes naming an unknown airport.
            auto_load: If True, the first search loads the network.
        """
        if data_provider is not None:
            self._data_provider = data_provider
        else:
            self._data_provider = CsvDirectoryProvider(data_dir or DEFAULT_DATA_DIR)

        self._graph_repo = NetworkGraphRepository(
            data_provider=self._data_provider,
            unknown_airports=unknown_airports,
            auto_load=auto_load,
        )

        self._route_finder = route_finder or DepthFirstRouteFinder()

        self._service = RouteFinderService(
            graph_repo=self._graph_repo,
            route_finder=self._route_finder,
        )

        logger.info(
            "FindRoute initialized with %s algorithm",
            self._route_finder.name,
        )

    def load(self) -> RouteNetwork:
        """
        Load the route network (once).

        Raises:
            IngestionError: If a source cannot be read or decoded.
            ShapeValidationError: If a collection is empty.
        """
        return self._graph_repo.load()

    def search(self, origin: Optional[str], destination: Optional[str]) -> PathResult:
        """
        Search for a path between airports.

        Args:
            origin: Origin airport IATA code (e.g., 'YYZ').
            destination: Destination airport IATA code.

        Returns:
            PathResult with the airports, distance and search statistics.

        Raises:
            QueryInputError: If the pair is rejected.
            NoRouteFoundError: If no path connects the pair.
        """
        return self._service.find_route(origin=origin, destination=destination)

    def lookup(self, origin: Optional[str], destination: Optional[str]) -> str:
        """
        Search and return only the '->' joined path string.

        Raises:
            QueryInputError: If the pair is rejected.
            NoRouteFoundError: If no path connects the pair.
        """
        return self.search(origin, destination).path

    def get_available_airports(self) -> frozenset[str]:
        """
        Get all airport codes in the loaded network.

        Returns:
            Frozenset of IATA airport codes.
        """
        return self._graph_repo.get_network().airport_codes

    def has_route(self, origin: str, destination: str) -> bool:
        """
        Check if a direct route exists between two airports.

        Returns:
            True if a route row connects origin to destination.
        """
        return self._graph_repo.get_network().has_route(origin, destination)

    @property
    def network(self) -> RouteNetwork:
        """The loaded network (loads it when auto_load is on)."""
        return self._graph_repo.get_network()

    @property
    def is_ready(self) -> bool:
        """Check if the router is ready to handle requests."""
        return self._service.is_ready

    @property
    def algorithm_name(self) -> str:
        """Get the name of the routing algorithm being used."""
        return self._service.algorithm_name
