"""
Tests for the depth-first algorithm adapter and immutability helpers.

Tests cover:
- SearchResult -> PathResult conversion
- Error propagation from the search engine
- Freezing of unfrozen airport collections
- Independence of concurrent searches sharing one network
"""

from concurrent.futures import ThreadPoolExecutor
from datetime import datetime
from types import MappingProxyType

import pytest

from src.pathfinder.exceptions import (
    InvalidDestinationError,
    NoRouteFoundError,
    SameOriginDestinationError,
)
from src.pathfinder.models import Airport
from src.route_network.adapters.algorithms.depth_first_adapter import (
    DepthFirstRouteFinder,
)
from src.route_network.adapters.algorithms.immutability import (
    freeze_airports,
    freeze_mapping,
    is_frozen,
)
from src.route_network.adapters.repositories.network_graph_repo import RouteNetwork
from src.route_network.ports.route_finder import RouteFinder
from src.route_network.schemas.path import PathResult


# =============================================================================
# FIXTURES
# =============================================================================


def make_airports(edges):
    airports = {}
    for origin, destination, _ in edges:
        for code in (origin, destination):
            airports.setdefault(code, Airport(code, "", "", code, 0.0, 0.0, {}))
    for origin, destination, weight in edges:
        airports[origin].connections.setdefault(destination, weight)
    return airports


def make_network(airports) -> RouteNetwork:
    return RouteNetwork(
        airlines={},
        airports=airports,
        routes={},
        built_at=datetime.now(),
        version="test123",
    )


@pytest.fixture
def edges():
    return [
        ("YYZ", "JFK", 5.0),
        ("YYZ", "YVR", 1.0),
        ("YVR", "JFK", 1.0),
        ("JFK", "LAX", 2.0),
        ("SYD", "MEL", 1.0),
    ]


@pytest.fixture
def network(edges) -> RouteNetwork:
    return make_network(freeze_airports(make_airports(edges)))


@pytest.fixture
def finder() -> DepthFirstRouteFinder:
    return DepthFirstRouteFinder()


# =============================================================================
# ADAPTER
# =============================================================================


class TestDepthFirstRouteFinder:
    def test_implements_port(self, finder):
        assert isinstance(finder, RouteFinder)
        assert finder.name == "Depth-First Branch and Bound"

    def test_returns_path_result(self, finder, network):
        # JFK is first reached by the direct hop, so the YVR branch cannot reuse it
        result = finder.find_route(network, "YYZ", "LAX")

        assert isinstance(result, PathResult)
        assert result.airports == ("YYZ", "JFK", "LAX")
        assert result.path == "YYZ->JFK->LAX"
        assert result.distance == pytest.approx(7.0)
        assert result.algorithm == finder.name
        assert result.expansions >= 1

    def test_query_errors_propagate(self, finder, network):
        with pytest.raises(SameOriginDestinationError):
            finder.find_route(network, "YYZ", "YYZ")
        with pytest.raises(InvalidDestinationError):
            finder.find_route(network, "YYZ", "CDG")

    def test_no_route_propagates(self, finder, network):
        with pytest.raises(NoRouteFoundError):
            finder.find_route(network, "YYZ", "SYD")

    def test_unfrozen_network_is_not_mutated(self, finder, edges):
        airports = make_airports(edges)
        network = make_network(airports)

        result = finder.find_route(network, "YYZ", "JFK")

        assert result.path == "YYZ->YVR->JFK"
        assert not isinstance(airports["YYZ"].connections, MappingProxyType)
        assert dict(airports["YYZ"].connections) == {"JFK": 5.0, "YVR": 1.0}

    def test_concurrent_searches_are_independent(self, finder, network):
        pairs = [("YYZ", "LAX"), ("YVR", "LAX"), ("YYZ", "JFK"), ("SYD", "MEL")] * 25

        with ThreadPoolExecutor(max_workers=8) as executor:
            paths = list(
                executor.map(lambda p: finder.find_route(network, *p).path, pairs)
            )

        expected = ["YYZ->JFK->LAX", "YVR->JFK->LAX", "YYZ->YVR->JFK", "SYD->MEL"]
        assert paths == expected * 25


# =============================================================================
# IMMUTABILITY
# =============================================================================


class TestImmutability:
    def test_freeze_airports(self, edges):
        airports = make_airports(edges)

        frozen = freeze_airports(airports)

        assert is_frozen(frozen)
        assert not is_frozen(airports)
        with pytest.raises(TypeError):
            frozen["YYZ"].connections["LAX"] = 9.0
        with pytest.raises(TypeError):
            frozen["CDG"] = airports["YYZ"]

    def test_freeze_is_a_copy(self, edges):
        airports = make_airports(edges)
        frozen = freeze_airports(airports)

        airports["YYZ"].connections["LAX"] = 9.0

        assert "LAX" not in frozen["YYZ"].connections

    def test_freeze_keeps_order(self, edges):
        frozen = freeze_airports(make_airports(edges))

        assert list(frozen["YYZ"].connections) == ["JFK", "YVR"]
        assert list(frozen) == ["YYZ", "JFK", "YVR", "LAX", "SYD", "MEL"]

    def test_outer_proxy_with_mutable_connections_is_not_frozen(self, edges):
        assert not is_frozen(MappingProxyType(make_airports(edges)))

    def test_freeze_mapping(self):
        frozen = freeze_mapping({"AC": 1})

        assert dict(frozen) == {"AC": 1}
        with pytest.raises(TypeError):
            frozen["UA"] = 2
