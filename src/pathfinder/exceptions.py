"""
Custom exceptions for the pathfinder module.

Provides a hierarchy of exceptions that separates load-time failures
(fatal for the process) from per-query failures (local to one search).
"""

from typing import Optional


class RouteSearchError(Exception):
    """Base exception for all pathfinder errors."""

    pass


# =============================================================================
# LOAD-TIME ERRORS: fatal, the service must not start serving queries
# =============================================================================


class IngestionError(RouteSearchError):
    """Raised when a record source cannot be read or a row cannot be decoded."""

    def __init__(
        self,
        source: str,
        reason: str,
        row_number: Optional[int] = None,
    ) -> None:
        self.source = source
        self.reason = reason
        self.row_number = row_number
        location = f"{source}, row {row_number}" if row_number is not None else source
        super().__init__(f"Failed to ingest {location}: {reason}")


class ShapeValidationError(RouteSearchError):
    """Base exception for collections left empty after a completed load."""

    collection: str = "data"

    def __init__(self, message: Optional[str] = None) -> None:
        super().__init__(
            message or f"{self.collection.capitalize()} data does not exist or invalid"
        )


class EmptyAirportsError(ShapeValidationError):
    """Raised when no airport was loaded."""

    collection = "airports"


class EmptyRoutesError(ShapeValidationError):
    """Raised when no route was loaded."""

    collection = "routes"


class EmptyAirlinesError(ShapeValidationError):
    """Raised when no airline was loaded."""

    collection = "airlines"


class GraphNotInitializedError(RouteSearchError):
    """Raised when the network is accessed before it was loaded."""

    pass


# =============================================================================
# QUERY ERRORS: reported per query, shared state is untouched
# =============================================================================


class QueryInputError(RouteSearchError):
    """Base exception for rejected origin/destination pairs."""

    pass


class InvalidQueryParametersError(QueryInputError):
    """Raised when origin or destination is missing from the request."""

    def __init__(self, message: str = "Invalid origin or destination parameters") -> None:
        super().__init__(message)


class SameOriginDestinationError(QueryInputError):
    """Raised when origin and destination are the same airport."""

    def __init__(self, airport: str) -> None:
        self.airport = airport
        super().__init__("Origin and destination are the same")


class InvalidOriginError(QueryInputError):
    """Raised when the origin code is not a loaded airport."""

    def __init__(self, airport: str) -> None:
        self.airport = airport
        super().__init__("Invalid origin airport")


class InvalidDestinationError(QueryInputError):
    """Raised when the destination code is not a loaded airport."""

    def __init__(self, airport: str) -> None:
        self.airport = airport
        super().__init__("Invalid dest airport")


class NoRouteFoundError(RouteSearchError):
    """Raised when the search space is exhausted without reaching destination."""

    def __init__(self, origin: str, destination: str) -> None:
        self.origin = origin
        self.destination = destination
        self.path = ""
        super().__init__("Invalid route")
