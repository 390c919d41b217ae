"""
Route Network Server - Main Entry Point.

Loads airlines, airports and routes from a data directory into memory,
then serves path lookups over HTTP.

Usage:
    python run_server.py <data directory> <server port>
"""

import argparse
import logging
import sys
from typing import List, Optional

import uvicorn

from src.api.routes_api import create_app
from src.pathfinder.exceptions import RouteSearchError
from src.route_network.application import FindRoute
from src.route_network.config import Config

# Module-level logger
logger = logging.getLogger(__name__)


def setup_logging(level: str = "INFO") -> None:
    """
    Configure the root logger to write timestamped records to stdout.
    """
    log_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    date_format = "%Y-%m-%d %H:%M:%S"

    formatter = logging.Formatter(log_format, datefmt=date_format)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Serve airline route lookups")
    parser.add_argument(
        "data_dir",
        nargs="?",
        default=Config.DATA_DIR,
        help="Directory with airlines.csv, airports.csv and routes.csv",
    )
    parser.add_argument(
        "port",
        nargs="?",
        type=int,
        default=Config.PORT,
        help="Port to listen on",
    )
    parser.add_argument("--host", default=Config.HOST, help="Interface to bind")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    """Load the network, exit on failure, then serve until interrupted."""
    args = parse_args(argv)
    setup_logging(Config.LOG_LEVEL)

    router = FindRoute(data_dir=args.data_dir, unknown_airports=Config.UNKNOWN_AIRPORTS)

    try:
        network = router.load()
    except RouteSearchError as e:
        logger.critical("Failed to import data: %s", e)
        sys.exit(1)

    logger.info("Load time: %.3fs", network.load_seconds)

    uvicorn.run(
        create_app(router),
        host=args.host,
        port=args.port,
        log_config=None,
    )


if __name__ == "__main__":
    main()
