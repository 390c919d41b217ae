"""
Configuration module for the route network service.

Loads environment variables (optionally from a .env file) and provides
centralized settings for data location, server binding and logging.
"""

import os

from dotenv import load_dotenv

from src.pathfinder.decoders import UNKNOWN_AIRPORT_POLICIES

# Load environment variables from .env file
load_dotenv()


class Config:
    """
    Application configuration class.

    Attributes:
        DATA_DIR: Directory holding airlines.csv, airports.csv, routes.csv.
        HOST: Interface the HTTP server binds to.
        PORT: Port the HTTP server listens on.
        LOG_LEVEL: Root logging level name.
        UNKNOWN_AIRPORTS: Policy for routes naming an unknown airport
            ("skip" or "zero").

    Raises:
        ValueError: If PORT is not an integer or UNKNOWN_AIRPORTS is not
            a known policy.
    """

    DATA_DIR: str = os.getenv("ROUTE_NETWORK_DATA_DIR", "data")
    HOST: str = os.getenv("ROUTE_NETWORK_HOST", "0.0.0.0")
    PORT: int = int(os.getenv("ROUTE_NETWORK_PORT", "8080"))
    LOG_LEVEL: str = os.getenv("ROUTE_NETWORK_LOG_LEVEL", "INFO").upper()
    UNKNOWN_AIRPORTS: str = os.getenv("ROUTE_NETWORK_UNKNOWN_AIRPORTS", "skip")

    if UNKNOWN_AIRPORTS not in UNKNOWN_AIRPORT_POLICIES:
        raise ValueError(
            f"ROUTE_NETWORK_UNKNOWN_AIRPORTS must be one of "
            f"{sorted(UNKNOWN_AIRPORT_POLICIES)}, got {UNKNOWN_AIRPORTS!r}"
        )
