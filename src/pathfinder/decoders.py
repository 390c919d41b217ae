"""
Record decoders for the route network.

Each decoder turns one tabular row (header already removed) into a typed
record and folds it into the collection it owns. Rows are positional:

- airline: [name, two-letter code, three-letter code, country]
- airport: [name, city, country, IATA code, latitude, longitude]
- route:   [airline id, origin code, destination code]

A row shorter than its layout raises IndexError; the caller decides how
fatal that is.
"""

import enum
import logging
import math
from typing import Optional, Sequence

from .models import Airline, Airlines, Airport, Airports, Route, Routes

logger = logging.getLogger(__name__)

SKIP_UNKNOWN_AIRPORTS = "skip"
ZERO_UNKNOWN_AIRPORTS = "zero"
UNKNOWN_AIRPORT_POLICIES = frozenset({SKIP_UNKNOWN_AIRPORTS, ZERO_UNKNOWN_AIRPORTS})

# Stand-in used by the "zero" policy for codes that are not loaded
_ZERO_AIRPORT = Airport(
    name="", city="", country="", iata="", latitude=0.0, longitude=0.0
)


class RouteDecodeStatus(enum.Enum):
    """Outcome of feeding one route row to decode_route."""

    STORED = "stored"
    DUPLICATE = "duplicate"
    NO_AIRPORTS = "no_airports"
    UNKNOWN_AIRPORT = "unknown_airport"


def parse_coordinate(text: str) -> float:
    """
    Parse a latitude/longitude field, degrading to 0.0 when malformed.

    Only a plain numeral is accepted: surrounding whitespace and digit
    separators make the field malformed.
    """
    if isinstance(text, str) and (text != text.strip() or "_" in text):
        return 0.0
    try:
        return float(text)
    except (TypeError, ValueError):
        return 0.0


def coordinate_distance(origin: Airport, destination: Airport) -> float:
    """
    Euclidean norm of the (latitude, longitude) difference.

    A relative proxy used to compare paths, not a great-circle distance.
    """
    return math.hypot(
        destination.latitude - origin.latitude,
        destination.longitude - origin.longitude,
    )


def lookup_airport(code: str, airports: Airports) -> Optional[Airport]:
    """Return the airport for `code`, or None when it was never loaded."""
    return airports.get(code)


def decode_airline(row: Sequence[str], airlines: Airlines) -> None:
    """Store the airline under its two-letter code, replacing any earlier entry."""
    airline = Airline(
        name=row[0],
        two_digit_code=row[1],
        three_digit_code=row[2],
        country=row[3],
    )
    airlines[airline.two_digit_code] = airline


def decode_airport(row: Sequence[str], airports: Airports) -> None:
    """Store the airport under its IATA code; the first occurrence wins."""
    iata = row[3]
    if iata in airports:
        return

    airports[iata] = Airport(
        name=row[0],
        city=row[1],
        country=row[2],
        iata=iata,
        latitude=parse_coordinate(row[4]),
        longitude=parse_coordinate(row[5]),
        connections={},
    )


def decode_route(
    row: Sequence[str],
    routes: Routes,
    airports: Airports,
    unknown_airports: str = SKIP_UNKNOWN_AIRPORTS,
) -> RouteDecodeStatus:
    """
    Store a route and add the directed edge origin -> destination.

    Only the first route of an ordered (origin, destination) pair is kept,
    and an edge already present on the origin is never overwritten.

    Args:
        row: Route row [airline id, origin code, destination code].
        routes: Route collection keyed by (origin, destination).
        airports: Airport collection; must be loaded before any route.
        unknown_airports: "skip" ignores rows naming an airport that was not
            loaded. "zero" measures the distance against (0, 0) for the
            missing endpoint and still stores the route.

    Returns:
        What happened to the row.
    """
    airline_id, origin_code, destination_code = row[0], row[1], row[2]

    if not airports:
        return RouteDecodeStatus.NO_AIRPORTS

    origin = lookup_airport(origin_code, airports)
    destination = lookup_airport(destination_code, airports)

    if origin is None or destination is None:
        if unknown_airports == SKIP_UNKNOWN_AIRPORTS:
            logger.debug(
                "Skipping route %s -> %s: unknown airport",
                origin_code,
                destination_code,
            )
            return RouteDecodeStatus.UNKNOWN_AIRPORT
        origin = origin or _ZERO_AIRPORT
        destination = destination or _ZERO_AIRPORT

    key = (origin_code, destination_code)
    if key in routes:
        return RouteDecodeStatus.DUPLICATE

    route = Route(
        airline_id=airline_id,
        origin=origin_code,
        destination=destination_code,
        distance=coordinate_distance(origin, destination),
    )
    routes[key] = route

    origin_airport = airports.get(origin_code)
    if origin_airport is not None:
        origin_airport.connections.setdefault(destination_code, route.distance)

    return RouteDecodeStatus.STORED
