"""
Schema definitions for the Route Network.

Pandera-validated record tables at the ingestion boundary and immutable
dataclasses for queries and results.
"""

from .path import PathResult
from .query import RouteQuery
from .records import (
    AIRLINE_FIELDS,
    AIRPORT_FIELDS,
    ROUTE_FIELDS,
    AirlineRecordSchema,
    AirportRecordSchema,
    RouteRecordSchema,
)

__all__ = [
    # Record tables
    "AIRLINE_FIELDS",
    "AIRPORT_FIELDS",
    "ROUTE_FIELDS",
    "AirlineRecordSchema",
    "AirportRecordSchema",
    "RouteRecordSchema",
    # Query / result
    "PathResult",
    "RouteQuery",
]
