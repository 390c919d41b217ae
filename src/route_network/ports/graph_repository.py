"""
Graph Repository port interface.

Defines how services obtain the loaded route network.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

from src.pathfinder.exceptions import GraphNotInitializedError

if TYPE_CHECKING:
    from src.route_network.adapters.repositories.network_graph_repo import (
        RouteNetwork,
    )


@runtime_checkable
class NetworkRepository(Protocol):
    """
    Protocol for access to the frozen route network.

    The network is loaded once per process and never mutated afterwards,
    so implementations only need to make the first load thread-safe.
    """

    def get_network(self) -> RouteNetwork:
        """
        Get the loaded network.

        Raises:
            GraphNotInitializedError: If the network is not loaded and the
                implementation does not load on demand.
        """
        ...

    @property
    def is_initialized(self) -> bool:
        """True once the network has been loaded."""
        ...


__all__ = ["GraphNotInitializedError", "NetworkRepository"]
