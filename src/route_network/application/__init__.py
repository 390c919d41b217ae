"""
Application layer for the Route Network.

This layer provides the public API for the route lookup engine.
It acts as a facade, handling dependency initialization and providing
a simple interface for consumers.
"""

from src.route_network.application.find_route import FindRoute

__all__ = ["FindRoute"]
