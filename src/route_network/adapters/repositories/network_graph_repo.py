"""
Network Graph Repository - load-once route network.

Builds the in-memory network from a data provider:
- Decodes sources in a fixed order (airlines, airports, routes)
- Derives per-airport connections while decoding routes
- Validates that no collection is empty
- Freezes the result so concurrent searches can share it without locks
"""

from __future__ import annotations

import hashlib
import logging
import threading
import time
from dataclasses import dataclass
from datetime import datetime
from typing import TYPE_CHECKING, Callable, Dict, Mapping, Optional, Sequence

from src.pathfinder.decoders import (
    SKIP_UNKNOWN_AIRPORTS,
    UNKNOWN_AIRPORT_POLICIES,
    RouteDecodeStatus,
    decode_airline,
    decode_airport,
    decode_route,
)
from src.pathfinder.exceptions import GraphNotInitializedError, IngestionError
from src.pathfinder.models import (
    Airline,
    Airlines,
    Airport,
    Airports,
    Route,
    RouteKey,
    Routes,
)
from src.pathfinder.validation import validate_collections
from src.route_network.adapters.algorithms.immutability import (
    freeze_airports,
    freeze_mapping,
)
from src.route_network.ports.network_data_provider import RecordSource

if TYPE_CHECKING:
    import pandas as pd

    from src.route_network.ports.network_data_provider import NetworkDataProvider

logger = logging.getLogger(__name__)

# Airports must be decoded before routes, or no connections are created
LOAD_ORDER = (RecordSource.AIRLINES, RecordSource.AIRPORTS, RecordSource.ROUTES)


# =============================================================================
# ROUTE NETWORK: frozen snapshot shared by all queries
# =============================================================================


@dataclass(frozen=True)
class RouteNetwork:
    """
    Read-only route network produced by one load pass.

    Attributes:
        airlines: Airlines keyed by two-letter code.
        airports: Airports keyed by IATA code, with frozen connections.
        routes: Routes keyed by (origin, destination).
        built_at: Timestamp when the network was built.
        version: Hash of the collection sizes and boundary keys.
        skipped_routes: Route rows ignored for naming an unknown airport.
        load_seconds: Time spent reading and decoding the sources.
    """

    airlines: Mapping[str, Airline]
    airports: Mapping[str, Airport]
    routes: Mapping[RouteKey, Route]
    built_at: datetime
    version: str
    skipped_routes: int = 0
    load_seconds: float = 0.0

    @property
    def airport_codes(self) -> frozenset[str]:
        return frozenset(self.airports)

    @property
    def edge_count(self) -> int:
        return sum(len(a.connections) for a in self.airports.values())

    def get_airport(self, code: str) -> Optional[Airport]:
        return self.airports.get(code)

    def has_airport(self, code: str) -> bool:
        return code in self.airports

    def has_route(self, origin: str, destination: str) -> bool:
        """Check if a direct route exists."""
        return (origin, destination) in self.routes

    def neighbours(self, code: str) -> Mapping[str, float]:
        """Connections of `code`; empty for unknown airports."""
        airport = self.airports.get(code)
        return airport.connections if airport is not None else {}


# =============================================================================
# GRAPH BUILDER: one pass over the sources
# =============================================================================


def _decode_rows(
    records: pd.DataFrame,
    source: RecordSource,
    decode: Callable[[Sequence[str]], object],
) -> Dict[object, int]:
    """
    Feed every row through `decode`, counting the returned outcomes.

    Row numbers reported in errors are file lines (header is line 1).
    """
    outcomes: Dict[object, int] = {}
    for row_number, row in enumerate(records.itertuples(index=False, name=None), start=2):
        try:
            outcome = decode(row)
        except IndexError as e:
            raise IngestionError(
                source.value, "row has too few fields", row_number=row_number
            ) from e
        outcomes[outcome] = outcomes.get(outcome, 0) + 1
    return outcomes


def build_network(
    data_provider: NetworkDataProvider,
    unknown_airports: str = SKIP_UNKNOWN_AIRPORTS,
) -> RouteNetwork:
    """
    Build a frozen RouteNetwork from the provider's three sources.

    Steps:
    1. Read and decode airlines, then airports, then routes
    2. Validate that no collection is empty
    3. Freeze the collections
    4. Compute a version hash

    Args:
        data_provider: Source of the raw record tables.
        unknown_airports: Policy for route rows naming an unknown airport
            ("skip" or "zero").

    Returns:
        Newly built RouteNetwork.

    Raises:
        IngestionError: If a source cannot be read or a row is too short.
        ShapeValidationError: If a collection is empty after the load.
    """
    if unknown_airports not in UNKNOWN_AIRPORT_POLICIES:
        raise ValueError(f"Unknown airport policy: {unknown_airports!r}")

    start = time.perf_counter()

    airlines: Airlines = {}
    airports: Airports = {}
    routes: Routes = {}

    decoders = {
        RecordSource.AIRLINES: lambda row: decode_airline(row, airlines),
        RecordSource.AIRPORTS: lambda row: decode_airport(row, airports),
        RecordSource.ROUTES: lambda row: decode_route(
            row, routes, airports, unknown_airports=unknown_airports
        ),
    }

    route_outcomes: Dict[object, int] = {}
    for source in LOAD_ORDER:
        records = data_provider.get_records(source)
        outcomes = _decode_rows(records, source, decoders[source])
        if source is RecordSource.ROUTES:
            route_outcomes = outcomes

    skipped = route_outcomes.get(RouteDecodeStatus.UNKNOWN_AIRPORT, 0)
    if skipped:
        logger.info("Skipped %d route rows naming an unknown airport", skipped)

    validate_collections(airlines, airports, routes)

    return RouteNetwork(
        airlines=freeze_mapping(airlines),
        airports=freeze_airports(airports),
        routes=freeze_mapping(routes),
        built_at=datetime.now(),
        version=_compute_version(airlines, airports, routes),
        skipped_routes=skipped,
        load_seconds=time.perf_counter() - start,
    )


def _compute_version(airlines: Airlines, airports: Airports, routes: Routes) -> str:
    """Compute a short hash of the collections for version tracking."""
    content = f"{len(airlines)}:{len(airports)}:{len(routes)}"
    if routes:
        keys = list(routes)
        content += f":{keys[0]}:{keys[-1]}"
    return hashlib.md5(content.encode()).hexdigest()[:12]


# =============================================================================
# NETWORK GRAPH REPOSITORY: load once, read many
# =============================================================================


class NetworkGraphRepository:
    """
    Holds the process-wide route network.

    Lifecycle: uninitialized -> loaded once -> frozen for queries.
    The first load is serialized by a lock; afterwards readers never block.
    Reloading is not supported: build a new repository instead.

    Usage:
        >>> provider = CsvDirectoryProvider("data")
        >>> repo = NetworkGraphRepository(provider)
        >>> network = repo.load()
    """

    def __init__(
        self,
        data_provider: NetworkDataProvider,
        unknown_airports: str = SKIP_UNKNOWN_AIRPORTS,
        auto_load: bool = True,
    ) -> None:
        """
        Initialize repository with a data provider.

        Args:
            data_provider: Source for record tables.
            unknown_airports: Policy for routes naming unknown airports.
            auto_load: If True, get_network() loads on first access.
        """
        if unknown_airports not in UNKNOWN_AIRPORT_POLICIES:
            raise ValueError(f"Unknown airport policy: {unknown_airports!r}")

        self._provider = data_provider
        self._unknown_airports = unknown_airports
        self._auto_load = auto_load
        self._network: Optional[RouteNetwork] = None
        self._load_lock = threading.Lock()

    def load(self) -> RouteNetwork:
        """
        Load the network if it has not been loaded yet.

        Returns:
            The loaded network.

        Raises:
            IngestionError: If a source cannot be read or decoded.
            ShapeValidationError: If a collection is empty.
        """
        if self._network is not None:
            return self._network

        with self._load_lock:
            # Double-check after acquiring lock
            if self._network is not None:
                return self._network

            logger.info("Loading route network from %s", self._provider.name)
            network = build_network(self._provider, self._unknown_airports)
            self._network = network

        logger.info(
            "Route network loaded in %.3fs: %d airlines, %d airports, "
            "%d routes, %d connections",
            network.load_seconds,
            len(network.airlines),
            len(network.airports),
            len(network.routes),
            network.edge_count,
        )
        return network

    def get_network(self) -> RouteNetwork:
        """
        Get the loaded network.

        Raises:
            GraphNotInitializedError: If nothing is loaded and auto_load is off.
        """
        network = self._network
        if network is not None:
            return network

        if not self._auto_load:
            raise GraphNotInitializedError("Route network has not been loaded")

        return self.load()

    @property
    def is_initialized(self) -> bool:
        """Check if the network has been loaded."""
        return self._network is not None

    @property
    def current_version(self) -> Optional[str]:
        """Get version of the loaded network."""
        return self._network.version if self._network else None
