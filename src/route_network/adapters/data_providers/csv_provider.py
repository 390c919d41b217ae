"""
CSV Directory Provider - flat files to DataFrame adapter.

Reads airlines.csv, airports.csv and routes.csv from a data directory and
hands each one over as a DataFrame of raw text fields, header removed,
validated against the record table schemas.
"""

import csv
import logging
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Tuple, Union

import pandas as pd
import pandera as pa

from src.pathfinder.exceptions import IngestionError
from src.route_network.ports.network_data_provider import (
    NetworkDataProvider,
    RecordSource,
)
from src.route_network.schemas.records import (
    AIRLINE_FIELDS,
    AIRPORT_FIELDS,
    ROUTE_FIELDS,
    AirlineRecordSchema,
    AirportRecordSchema,
    RouteRecordSchema,
)

logger = logging.getLogger(__name__)

SOURCE_FILES: Dict[RecordSource, str] = {
    RecordSource.AIRLINES: "airlines.csv",
    RecordSource.AIRPORTS: "airports.csv",
    RecordSource.ROUTES: "routes.csv",
}

SOURCE_LAYOUTS: Dict[RecordSource, Tuple[Tuple[str, ...], pa.DataFrameSchema]] = {
    RecordSource.AIRLINES: (AIRLINE_FIELDS, AirlineRecordSchema),
    RecordSource.AIRPORTS: (AIRPORT_FIELDS, AirportRecordSchema),
    RecordSource.ROUTES: (ROUTE_FIELDS, RouteRecordSchema),
}


def empty_records(source: RecordSource) -> pd.DataFrame:
    """Empty DataFrame with the source's field names."""
    fields, _ = SOURCE_LAYOUTS[source]
    return pd.DataFrame(columns=list(fields))


# (file line, number of fields) for each data row of a file
RowLayout = Sequence[Tuple[int, int]]


def read_row_layout(path: Path) -> List[Tuple[int, int]]:
    """
    Count the fields of every data row as written in the file.

    pandas pads short rows to the table width with empty strings, so the
    only place a short row is still visible is the raw record. Blank lines
    and the header are skipped the same way read_csv skips them.
    """
    with open(path, newline="", encoding="utf-8") as f:
        reader = csv.reader(f)
        rows = (
            (reader.line_num, len(row))
            for row in reader
            if row and not (len(row) == 1 and not row[0].strip())
        )
        next(rows, None)
        return list(rows)


def mask_short_rows(
    df: pd.DataFrame,
    layout: RowLayout,
    width: int,
    location: str,
) -> pd.DataFrame:
    """Null out the padded cells of rows that supplied fewer than `width` fields."""
    if len(layout) != len(df):
        raise IngestionError(
            location,
            f"found {len(layout)} rows but parsed {len(df)}",
        )

    for position, (_, count) in enumerate(layout):
        if count < width:
            df.iloc[position, count:width] = None
    return df


def _first_failing_row(
    error: pa.errors.SchemaError,
    layout: Optional[RowLayout] = None,
) -> Optional[int]:
    """File line of the first failing row (header is line 1), if known."""
    cases = getattr(error, "failure_cases", None)
    if not isinstance(cases, pd.DataFrame) or cases.empty or "index" not in cases:
        return None
    index = cases["index"].iloc[0]
    if index is None or pd.isna(index):
        return None
    if layout is not None:
        return layout[int(index)][0]
    return int(index) + 2


def normalize_records(
    df: pd.DataFrame,
    source: RecordSource,
    location: str,
    layout: Optional[RowLayout] = None,
) -> pd.DataFrame:
    """
    Name the positional columns of a raw table and validate it.

    Column headers in the files are free text, so fields are matched by
    position. Extra trailing columns are kept as extra_0, extra_1, ...
    With a row layout, cells a short row never supplied become nulls
    before validation.

    Raises:
        IngestionError: If the table is narrower than the layout, or a
            row is too short to supply every field.
    """
    fields, schema = SOURCE_LAYOUTS[source]

    if df.shape[1] < len(fields):
        raise IngestionError(
            location,
            f"expected at least {len(fields)} columns, found {df.shape[1]}",
        )

    extra = [f"extra_{i}" for i in range(df.shape[1] - len(fields))]
    df.columns = list(fields) + extra

    if layout is not None:
        df = mask_short_rows(df, layout, len(fields), location)

    try:
        return schema.validate(df)
    except pa.errors.SchemaError as e:
        raise IngestionError(
            location,
            "row is missing required fields",
            row_number=_first_failing_row(e, layout),
        ) from e


class CsvDirectoryProvider(NetworkDataProvider):
    """
    Data provider for a directory of comma-separated record files.

    Attributes:
        _data_dir: Directory holding the three CSV files.
    """

    def __init__(self, data_dir: Union[str, Path] = "data") -> None:
        """
        Initialize the CSV provider.

        Args:
            data_dir: Directory containing airlines.csv, airports.csv
                and routes.csv.
        """
        self._data_dir = Path(data_dir)

    @property
    def data_dir(self) -> Path:
        return self._data_dir

    def source_path(self, source: RecordSource) -> Path:
        """Path of the file backing `source`."""
        return self._data_dir / SOURCE_FILES[source]

    def get_records(self, source: RecordSource) -> pd.DataFrame:
        """
        Read one source file into a validated DataFrame.

        Every field is kept as text; an empty field stays an empty string.
        A missing or empty file yields an empty DataFrame.

        Raises:
            IngestionError: If the data directory is missing or the file
                cannot be read or parsed.
        """
        if not self._data_dir.is_dir():
            raise IngestionError(
                str(self._data_dir), "data directory does not exist"
            )

        path = self.source_path(source)
        if not path.is_file():
            logger.warning("Source file not found: %s", path)
            return empty_records(source)

        try:
            df = pd.read_csv(
                path,
                header=0,
                dtype=object,
                keep_default_na=False,
                index_col=False,
            )
            layout = read_row_layout(path)
        except pd.errors.EmptyDataError:
            logger.warning("Source file is empty: %s", path)
            return empty_records(source)
        except (OSError, UnicodeDecodeError, csv.Error, pd.errors.ParserError) as e:
            raise IngestionError(str(path), str(e)) from e

        records = normalize_records(df, source, str(path), layout=layout)

        logger.info("Read %d %s records from %s", len(records), source.value, path)

        return records

    @property
    def name(self) -> str:
        """Human-readable provider name."""
        return f"CSV directory {self._data_dir}"

    @property
    def is_available(self) -> bool:
        """Check if the data directory exists."""
        return self._data_dir.is_dir()
