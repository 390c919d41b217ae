"""
Network Data Provider port interface.

Defines the abstract contract for sources of airline, airport and route
records. Implementations handle the specifics of the storage backend
(CSV directory, database, in-memory fixtures).
"""

import enum
from abc import ABC, abstractmethod

import pandas as pd


class RecordSource(enum.Enum):
    """The three tabular sources, named by role."""

    AIRLINES = "airlines"
    AIRPORTS = "airports"
    ROUTES = "routes"


class NetworkDataProvider(ABC):
    """
    Abstract interface for route network record sources.

    Providers return each source as a DataFrame of raw text fields in
    file order, with the header row already removed. Decoding into typed
    records is left to the graph builder.

    Implementations:
    - CsvDirectoryProvider: airlines.csv / airports.csv / routes.csv in a directory
    - MockDataProvider: in-memory DataFrames for testing
    """

    @abstractmethod
    def get_records(self, source: RecordSource) -> pd.DataFrame:
        """
        Return the rows of one source.

        An absent source is returned as an empty DataFrame so that the
        builder's shape validation reports it.

        Args:
            source: Which record source to read.

        Returns:
            DataFrame with one row per record, fields in positional order.

        Raises:
            IngestionError: If the source exists but cannot be read.
        """
        ...

    @property
    @abstractmethod
    def name(self) -> str:
        """
        Human-readable name of this data provider.

        Returns:
            Provider identifier (e.g., "CSV directory data/").
        """
        ...

    @property
    def is_available(self) -> bool:
        """
        Check if the data source is currently available.

        Default implementation returns True.
        """
        return True
