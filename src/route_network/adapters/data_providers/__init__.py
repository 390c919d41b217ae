"""
Data provider adapters for route network record sources.
"""

from src.route_network.adapters.data_providers.csv_provider import (
    CsvDirectoryProvider,
)

__all__ = [
    "CsvDirectoryProvider",
]
