"""
Depth-first route search with branch-and-bound pruning.

The engine is an approximate search, not a shortest-path algorithm:

- A single visited set is shared by the whole invocation, so an airport
  reached first through a worse branch is never expanded again and a
  cheaper path through it can be missed.
- A branch is abandoned as soon as its accumulated distance meets or
  exceeds the best candidate found so far.
- Whenever the destination is a direct neighbour of the airport being
  expanded, that branch yields a candidate. A candidate replaces the best
  one only if its distance is strictly lower.

Exploration runs on an explicit stack of frames that visits airports in
exactly the order the recursive formulation would, so deep networks do
not hit the interpreter recursion limit. All mutable state lives in a
SearchContext created per invocation; the airport collection is only read.
"""

import logging
from dataclasses import dataclass, field
from typing import Iterator, Mapping, Optional, Sequence, Set, Tuple

from .exceptions import NoRouteFoundError
from .models import Airport
from .validation import validate_search_inputs

logger = logging.getLogger(__name__)

PATH_SEPARATOR = "->"


def format_path(airports: Sequence[str]) -> str:
    """Join airport codes in traversal order, e.g. 'YYZ->JFK->LAX'."""
    return PATH_SEPARATOR.join(airports)


@dataclass
class SearchContext:
    """
    Mutable state of one search invocation.

    Never share an instance between invocations: the visited set and the
    best candidate are what make a search non re-entrant.
    """

    destination: str
    visited: Set[str] = field(default_factory=set)
    best_path: Optional[Tuple[str, ...]] = None
    best_distance: Optional[float] = None
    expansions: int = 0

    def can_improve(self, distance: float) -> bool:
        """Whether a branch at `distance` may still beat the best candidate."""
        return self.best_distance is None or distance < self.best_distance

    def offer(self, path: Tuple[str, ...], distance: float) -> bool:
        """Record a completed path if it is strictly better than the best one."""
        if not self.can_improve(distance):
            return False
        self.best_path = path
        self.best_distance = distance
        return True

    @property
    def found(self) -> bool:
        return self.best_path is not None


@dataclass(frozen=True)
class SearchResult:
    """Best path found by one invocation."""

    airports: Tuple[str, ...]
    distance: float
    expansions: int

    @property
    def path(self) -> str:
        return format_path(self.airports)


@dataclass
class _Frame:
    path: Tuple[str, ...]
    distance: float
    neighbours: Iterator[Tuple[str, float]]


def _expand(
    code: str,
    path: Tuple[str, ...],
    distance: float,
    airports: Mapping[str, Airport],
    context: SearchContext,
) -> _Frame:
    """Offer the direct hop to destination, mark `code` visited, open a frame."""
    context.expansions += 1

    airport = airports.get(code)
    connections: Mapping[str, float] = airport.connections if airport else {}

    weight = connections.get(context.destination)
    if weight is not None:
        context.offer(path + (context.destination,), distance + weight)

    context.visited.add(code)
    return _Frame(path=path, distance=distance, neighbours=iter(connections.items()))


def explore(
    airports: Mapping[str, Airport],
    origin: str,
    context: SearchContext,
) -> None:
    """
    Run the depth-first exploration from `origin`, filling `context`.

    Neighbours are visited in the insertion order of each airport's
    connections, which is the order routes were loaded.
    """
    stack = [_expand(origin, (origin,), 0.0, airports, context)]

    while stack:
        frame = stack[-1]
        for neighbour, weight in frame.neighbours:
            if neighbour == context.destination or neighbour in context.visited:
                continue
            accumulated = frame.distance + weight
            if not context.can_improve(accumulated):
                continue
            stack.append(
                _expand(
                    neighbour,
                    frame.path + (neighbour,),
                    accumulated,
                    airports,
                    context,
                )
            )
            break
        else:
            stack.pop()


def find_path(
    airports: Mapping[str, Airport],
    origin: str,
    destination: str,
) -> SearchResult:
    """
    Validate the pair and search for a path from origin to destination.

    Args:
        airports: Frozen airport collection with connections.
        origin: Origin IATA code.
        destination: Destination IATA code.

    Returns:
        The best path found under the exploration policy.

    Raises:
        SameOriginDestinationError: If origin equals destination.
        InvalidOriginError: If origin is not a loaded airport.
        InvalidDestinationError: If destination is not a loaded airport.
        NoRouteFoundError: If no explored branch reaches destination.
    """
    validate_search_inputs(origin, destination, airports)

    context = SearchContext(destination=destination)
    explore(airports, origin, context)

    if not context.found:
        raise NoRouteFoundError(origin, destination)

    logger.debug(
        "shortest route: %s distance: %f",
        format_path(context.best_path),
        context.best_distance,
    )
    return SearchResult(
        airports=context.best_path,
        distance=context.best_distance,
        expansions=context.expansions,
    )


def start_route_search(
    airports: Mapping[str, Airport],
    origin: str,
    destination: str,
) -> str:
    """Search and return the path as a '->' joined string."""
    return find_path(airports, origin, destination).path
