"""
Route query schema.

Defines the validated origin/destination pair handed to the search.
"""

from dataclasses import dataclass
from typing import Optional

from src.pathfinder.exceptions import InvalidQueryParametersError


@dataclass(frozen=True)
class RouteQuery:
    """
    Immutable origin/destination request.

    Codes are kept exactly as given; lookups are case sensitive.

    Attributes:
        origin: Origin airport IATA code.
        destination: Destination airport IATA code.
    """

    origin: str
    destination: str

    def __post_init__(self) -> None:
        if not self.origin or not self.destination:
            raise InvalidQueryParametersError()

    @classmethod
    def create(
        cls,
        origin: Optional[str],
        destination: Optional[str],
    ) -> "RouteQuery":
        """
        Factory accepting missing request parameters.

        Raises:
            InvalidQueryParametersError: If either code is None or empty.
        """
        if origin is None or destination is None:
            raise InvalidQueryParametersError()
        return cls(origin=origin, destination=destination)
