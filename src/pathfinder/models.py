from dataclasses import dataclass, field
from typing import Dict, Mapping, Tuple


RouteKey = Tuple[str, str]


@dataclass(frozen=True)
class Airline:
    """Reference data only; the search never consults airlines."""

    name: str
    two_digit_code: str
    three_digit_code: str
    country: str


@dataclass(frozen=True)
class Airport:
    """
    A node of the route network.

    `connections` maps a directly reachable airport code to the edge
    distance. It is a plain dict while the network is being loaded and
    is replaced by a read-only view once the load is frozen.
    """

    name: str
    city: str
    country: str
    iata: str
    latitude: float
    longitude: float
    connections: Mapping[str, float] = field(default_factory=dict, compare=False)


@dataclass(frozen=True)
class Route:
    """A directed origin/destination pair, unique regardless of airline."""

    airline_id: str
    origin: str
    destination: str
    distance: float

    @property
    def key(self) -> RouteKey:
        return (self.origin, self.destination)


# Collections filled during the load pass
Airlines = Dict[str, Airline]
Airports = Dict[str, Airport]
Routes = Dict[RouteKey, Route]
