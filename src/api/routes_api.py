"""
HTTP query service for route lookups.

create_app() builds the service around any FindRoute. The module-level
`app` is the import target for running without the entry script:

    uvicorn src.api.routes_api:app --port 8080

Constructing it reads nothing; the network is loaded on startup.
"""

import logging
from contextlib import asynccontextmanager
from typing import List, Optional

from fastapi import FastAPI, HTTPException
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel, ConfigDict

from src.pathfinder.exceptions import (
    NoRouteFoundError,
    QueryInputError,
    RouteSearchError,
)
from src.route_network.application import FindRoute
from src.route_network.config import Config

logger = logging.getLogger(__name__)


# --- Pydantic Schemas (The JSON Contract) ---
# Read straight from the PathResult dataclass, including its @property fields.


class PathResultSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    path: str  # This captures the @property
    airports: List[str]
    distance: float
    num_segments: int  # Captures @property
    stops: List[str]  # Captures @property
    expansions: int
    algorithm: str


class HealthSchema(BaseModel):
    ready: bool
    airports: int


def create_app(router: FindRoute) -> FastAPI:
    """
    Build the query service around a FindRoute instance.

    The network is loaded during startup; a load failure aborts startup so
    the service never answers queries from a partial load.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        router.load()
        yield

    app = FastAPI(title="Route Network API", lifespan=lifespan)

    # --- API Endpoints ---

    @app.get("/backendTest", response_class=PlainTextResponse)
    def backend_test(
        origin: Optional[str] = None,
        destination: Optional[str] = None,
    ) -> PlainTextResponse:
        # Every outcome is plain text with status 200, errors included
        try:
            return PlainTextResponse(router.lookup(origin, destination))
        except (QueryInputError, NoRouteFoundError) as e:
            return PlainTextResponse(str(e))
        except RouteSearchError as e:
            logger.error("Route network unavailable: %s", e)
            return PlainTextResponse("Route network unavailable", status_code=503)

    @app.api_route(
        "/backendTest",
        methods=["POST", "PUT", "PATCH", "DELETE"],
        response_class=PlainTextResponse,
    )
    def backend_test_invalid_method() -> PlainTextResponse:
        return PlainTextResponse("Invalid method.")

    @app.get("/route", response_model=PathResultSchema)
    def find_route(origin: Optional[str] = None, destination: Optional[str] = None):
        try:
            result = router.search(origin, destination)
        except QueryInputError as e:
            raise HTTPException(status_code=400, detail=str(e))
        except NoRouteFoundError as e:
            raise HTTPException(status_code=404, detail=str(e))
        except RouteSearchError as e:
            logger.error("Route network unavailable: %s", e)
            raise HTTPException(status_code=503, detail="Route network unavailable")
        # Validate explicitly so the @property fields are read from the dataclass
        return PathResultSchema.model_validate(result)

    @app.get("/health", response_model=HealthSchema)
    def health():
        airports = len(router.network.airports) if router.is_ready else 0
        return HealthSchema(ready=router.is_ready, airports=airports)

    return app


# Import target for `uvicorn src.api.routes_api:app`; run_server.py builds its own
router = FindRoute(
    data_dir=Config.DATA_DIR,
    unknown_airports=Config.UNKNOWN_AIRPORTS,
)
app = create_app(router)
