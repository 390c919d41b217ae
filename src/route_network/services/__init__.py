"""
Domain services for the Route Network.

Services orchestrate the interaction between ports (repositories, algorithms)
and domain logic (query validation, result transformation).
"""

from src.route_network.services.route_finder_service import RouteFinderService

__all__ = ["RouteFinderService"]
