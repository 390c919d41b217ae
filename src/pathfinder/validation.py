"""
Input validation for the pathfinder module.

Load-shape checks run once after ingestion; search-input checks run
before every search so that bad queries fail fast with a distinct error.
"""

from typing import Mapping

from .exceptions import (
    EmptyAirlinesError,
    EmptyAirportsError,
    EmptyRoutesError,
    InvalidDestinationError,
    InvalidOriginError,
    SameOriginDestinationError,
)
from .models import Airlines, Airport, Airports, Routes


def validate_collections(
    airlines: Airlines,
    airports: Airports,
    routes: Routes,
) -> None:
    """
    Validate that the load produced data for every collection.

    Raises:
        EmptyAirportsError: If no airport was loaded.
        EmptyRoutesError: If no route was loaded.
        EmptyAirlinesError: If no airline was loaded.
    """
    if not airports:
        raise EmptyAirportsError()
    if not routes:
        raise EmptyRoutesError()
    if not airlines:
        raise EmptyAirlinesError()


def validate_search_inputs(
    origin: str,
    destination: str,
    airports: Mapping[str, Airport],
) -> None:
    """
    Validate an origin/destination pair against the loaded airports.

    The same-airport check comes first and does not look at the data.

    Raises:
        SameOriginDestinationError: If origin equals destination.
        InvalidOriginError: If origin is not a loaded airport.
        InvalidDestinationError: If destination is not a loaded airport.
    """
    if origin == destination:
        raise SameOriginDestinationError(origin)
    if origin not in airports:
        raise InvalidOriginError(origin)
    if destination not in airports:
        raise InvalidDestinationError(destination)
