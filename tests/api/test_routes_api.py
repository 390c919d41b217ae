"""
Tests for the HTTP query service.

Tests cover:
- /backendTest plain-text answers, errors included, always status 200
- /backendTest rejecting non-GET methods
- /route JSON results and status codes
- /health readiness
- Startup load and load failures
"""

from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from src.api.routes_api import create_app
from src.pathfinder.exceptions import EmptyAirportsError
from src.route_network.adapters.algorithms import DepthFirstRouteFinder
from src.route_network.application import FindRoute


# =============================================================================
# FIXTURES
# =============================================================================


def write_network(
    data_dir: Path,
    airports: str = (
        "Name,City,Country,IATA 3,Latitute ,Longitude\n"
        "Pearson,Toronto,Canada,YYZ,0,0\n"
        "Kennedy,New York,United States,JFK,3,4\n"
        "Los Angeles,Los Angeles,United States,LAX,3,10\n"
        "Kingsford Smith,Sydney,Australia,SYD,50,50\n"
    ),
) -> Path:
    (data_dir / "airlines.csv").write_text(
        "Name,2 Digit Code,3 Digit Code,Country\n"
        "Air Canada,AC,ACA,Canada\n"
        "United Airlines,UA,UAL,United States\n",
        encoding="utf-8",
    )
    (data_dir / "airports.csv").write_text(airports, encoding="utf-8")
    (data_dir / "routes.csv").write_text(
        "Airline Id,Origin,Destination\nAC,YYZ,JFK\nUA,JFK,LAX\n",
        encoding="utf-8",
    )
    return data_dir


@pytest.fixture
def router(tmp_path: Path) -> FindRoute:
    return FindRoute(data_dir=write_network(tmp_path))


@pytest.fixture
def client(router: FindRoute):
    with TestClient(create_app(router)) as test_client:
        yield test_client


# =============================================================================
# /backendTest
# =============================================================================


class TestBackendTest:
    def test_returns_path_as_plain_text(self, client):
        response = client.get(
            "/backendTest", params={"origin": "YYZ", "destination": "LAX"}
        )

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/plain")
        assert response.text == "YYZ->JFK->LAX"

    def test_direct_route(self, client):
        response = client.get(
            "/backendTest", params={"origin": "YYZ", "destination": "JFK"}
        )

        assert response.text == "YYZ->JFK"

    @pytest.mark.parametrize(
        "params,expected",
        [
            ({"origin": "YYZ", "destination": "YYZ"}, "Origin and destination are the same"),
            ({"origin": "XXX", "destination": "JFK"}, "Invalid origin airport"),
            ({"origin": "YYZ", "destination": "XXX"}, "Invalid dest airport"),
            ({"origin": "YYZ", "destination": "SYD"}, "Invalid route"),
            ({"origin": "LAX", "destination": "YYZ"}, "Invalid route"),
            ({"origin": "YYZ"}, "Invalid origin or destination parameters"),
            ({"destination": "JFK"}, "Invalid origin or destination parameters"),
            ({}, "Invalid origin or destination parameters"),
            ({"origin": "", "destination": "JFK"}, "Invalid origin or destination parameters"),
        ],
    )
    def test_errors_are_plain_text_with_status_200(self, client, params, expected):
        response = client.get("/backendTest", params=params)

        assert response.status_code == 200
        assert response.text == expected

    @pytest.mark.parametrize("method", ["post", "put", "patch", "delete"])
    def test_other_methods_rejected(self, client, method):
        response = getattr(client, method)("/backendTest")

        assert response.status_code == 200
        assert response.text == "Invalid method."


# =============================================================================
# /route
# =============================================================================


class TestRouteEndpoint:
    def test_returns_path_result(self, client):
        response = client.get("/route", params={"origin": "YYZ", "destination": "LAX"})

        assert response.status_code == 200
        body = response.json()
        assert body["path"] == "YYZ->JFK->LAX"
        assert body["airports"] == ["YYZ", "JFK", "LAX"]
        assert body["distance"] == pytest.approx(11.0)
        assert body["num_segments"] == 2
        assert body["stops"] == ["JFK"]
        assert body["expansions"] >= 2
        assert body["algorithm"] == DepthFirstRouteFinder().name

    def test_rejected_pair_is_400(self, client):
        response = client.get("/route", params={"origin": "XXX", "destination": "JFK"})

        assert response.status_code == 400
        assert response.json()["detail"] == "Invalid origin airport"

    def test_missing_parameter_is_400(self, client):
        response = client.get("/route", params={"origin": "YYZ"})

        assert response.status_code == 400

    def test_no_route_is_404(self, client):
        response = client.get("/route", params={"origin": "YYZ", "destination": "SYD"})

        assert response.status_code == 404
        assert response.json()["detail"] == "Invalid route"


# =============================================================================
# /health AND STARTUP
# =============================================================================


class TestHealthAndStartup:
    def test_health_after_startup(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"ready": True, "airports": 4}

    def test_startup_loads_network(self, router):
        assert router.is_ready is False

        with TestClient(create_app(router)):
            assert router.is_ready is True

    def test_startup_fails_on_empty_airports(self, tmp_path):
        write_network(tmp_path, airports="Name,City,Country,IATA 3,Latitute ,Longitude\n")
        app = create_app(FindRoute(data_dir=tmp_path))

        with pytest.raises(EmptyAirportsError):
            with TestClient(app):
                pass

    def test_unavailable_network_is_503_without_startup(self, tmp_path):
        write_network(tmp_path, airports="Name,City,Country,IATA 3,Latitute ,Longitude\n")
        # No context manager: the lifespan load never runs
        client = TestClient(create_app(FindRoute(data_dir=tmp_path)))

        response = client.get(
            "/backendTest", params={"origin": "YYZ", "destination": "JFK"}
        )

        assert response.status_code == 503
        assert response.text == "Route network unavailable"

    def test_module_app_reads_nothing_on_import(self):
        from src.api import routes_api

        assert routes_api.router.is_ready is False
        assert routes_api.app.title == "Route Network API"
