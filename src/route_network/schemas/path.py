"""
Path result schema.

Standardizes the output of route finders for services and the API.
"""

from dataclasses import dataclass
from typing import List, Sequence

from src.pathfinder.search import format_path


@dataclass(frozen=True)
class PathResult:
    """
    Immutable representation of a found path.

    Attributes:
        airports: Airport codes from origin to destination.
        distance: Accumulated edge distance along the path.
        expansions: Number of airports expanded by the search.
        algorithm: Name of the route finder that produced the path.
    """

    airports: tuple[str, ...]
    distance: float
    expansions: int = 0
    algorithm: str = ""

    def __post_init__(self) -> None:
        if len(self.airports) < 2:
            raise ValueError("Path must contain at least origin and destination")

    @property
    def path(self) -> str:
        """Airport codes joined with '->'."""
        return format_path(self.airports)

    @property
    def origin(self) -> str:
        return self.airports[0]

    @property
    def destination(self) -> str:
        return self.airports[-1]

    @property
    def num_segments(self) -> int:
        """Number of hops (edges) in the path."""
        return len(self.airports) - 1

    @property
    def stops(self) -> List[str]:
        """Intermediate airports, excluding origin and destination."""
        return list(self.airports[1:-1])

    @classmethod
    def from_airports(
        cls,
        airports: Sequence[str],
        distance: float,
        expansions: int = 0,
        algorithm: str = "",
    ) -> "PathResult":
        return cls(
            airports=tuple(airports),
            distance=distance,
            expansions=expansions,
            algorithm=algorithm,
        )
