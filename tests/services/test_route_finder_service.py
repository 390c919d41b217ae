"""
Tests for RouteFinderService.

Tests cover:
- Query validation before the network is touched
- Delegation to the graph repository and route finder
- Error propagation and readiness reporting
"""

import logging
from unittest.mock import MagicMock

import pytest

from src.pathfinder.exceptions import (
    GraphNotInitializedError,
    InvalidOriginError,
    InvalidQueryParametersError,
    NoRouteFoundError,
)
from src.route_network.schemas.path import PathResult
from src.route_network.services.route_finder_service import RouteFinderService


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def path_result() -> PathResult:
    return PathResult.from_airports(
        ["YYZ", "JFK"], distance=5.0, expansions=1, algorithm="Mock"
    )


@pytest.fixture
def graph_repo() -> MagicMock:
    repo = MagicMock()
    repo.get_network.return_value = MagicMock(name="network")
    repo.is_initialized = True
    return repo


@pytest.fixture
def route_finder(path_result) -> MagicMock:
    finder = MagicMock()
    finder.name = "Mock Finder"
    finder.find_route.return_value = path_result
    return finder


@pytest.fixture
def service(graph_repo, route_finder) -> RouteFinderService:
    return RouteFinderService(graph_repo=graph_repo, route_finder=route_finder)


# =============================================================================
# TESTS
# =============================================================================


class TestFindRoute:
    def test_delegates_to_finder(self, service, graph_repo, route_finder, path_result):
        result = service.find_route("YYZ", "JFK")

        assert result is path_result
        route_finder.find_route.assert_called_once_with(
            network=graph_repo.get_network.return_value,
            origin="YYZ",
            destination="JFK",
        )

    @pytest.mark.parametrize("origin,destination", [(None, "JFK"), ("YYZ", "")])
    def test_missing_parameters_rejected_before_search(
        self, service, graph_repo, route_finder, origin, destination
    ):
        with pytest.raises(InvalidQueryParametersError):
            service.find_route(origin, destination)

        graph_repo.get_network.assert_not_called()
        route_finder.find_route.assert_not_called()

    def test_query_error_propagates(self, service, route_finder):
        route_finder.find_route.side_effect = InvalidOriginError("XXX")

        with pytest.raises(InvalidOriginError):
            service.find_route("XXX", "JFK")

    def test_no_route_propagates(self, service, route_finder):
        route_finder.find_route.side_effect = NoRouteFoundError("YYZ", "SYD")

        with pytest.raises(NoRouteFoundError):
            service.find_route("YYZ", "SYD")

    def test_uninitialized_graph_propagates(self, service, graph_repo, route_finder):
        graph_repo.get_network.side_effect = GraphNotInitializedError("not loaded")

        with pytest.raises(GraphNotInitializedError):
            service.find_route("YYZ", "JFK")

        route_finder.find_route.assert_not_called()

    def test_logs_completed_search(self, service, caplog):
        with caplog.at_level(logging.INFO):
            service.find_route("YYZ", "JFK")

        assert "YYZ->JFK" in caplog.text

    def test_logs_rejected_search(self, service, route_finder, caplog):
        route_finder.find_route.side_effect = NoRouteFoundError("YYZ", "SYD")

        with caplog.at_level(logging.INFO), pytest.raises(NoRouteFoundError):
            service.find_route("YYZ", "SYD")

        assert "Invalid route" in caplog.text


class TestServiceProperties:
    def test_algorithm_name(self, service):
        assert service.algorithm_name == "Mock Finder"

    def test_is_ready(self, service, graph_repo):
        assert service.is_ready is True

        graph_repo.is_initialized = False
        assert service.is_ready is False
