"""
Immutability utilities for the loaded airport collection.

The network is shared by every concurrent search, so once the load pass
is finished its collections are exposed only through read-only views.
"""

import dataclasses
from types import MappingProxyType
from typing import Mapping

from src.pathfinder.models import Airport


def freeze_airports(airports: Mapping[str, Airport]) -> Mapping[str, Airport]:
    """
    Return a read-only copy of the airport collection.

    Each airport's connections dict is copied into a MappingProxyType, and
    the outer mapping is wrapped the same way. Insertion order is kept, so
    the search visits neighbours in load order.

    Example:
        >>> frozen = freeze_airports(airports)
        >>> frozen["YYZ"].connections["JFK"] = 1.0  # Raises TypeError
    """
    return MappingProxyType(
        {
            code: dataclasses.replace(
                airport, connections=MappingProxyType(dict(airport.connections))
            )
            for code, airport in airports.items()
        }
    )


def freeze_mapping(mapping: Mapping) -> Mapping:
    """Read-only shallow copy of any collection keyed by identity."""
    return MappingProxyType(dict(mapping))


def is_frozen(airports: Mapping[str, Airport]) -> bool:
    """
    Check that the collection and every connections mapping are read-only.
    """
    if not isinstance(airports, MappingProxyType):
        return False
    return all(
        isinstance(airport.connections, MappingProxyType)
        for airport in airports.values()
    )
