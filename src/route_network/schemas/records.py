"""
Record table schemas using Pandera.

Defines the raw contract for the three tabular sources. Validation
happens once per source at the provider boundary, not per row: every
field a decoder reads must be present. Empty text is allowed and extra
trailing columns pass through.
"""

from typing import Tuple

import pandera as pa

AIRLINE_FIELDS: Tuple[str, ...] = (
    "name",
    "two_digit_code",
    "three_digit_code",
    "country",
)
AIRPORT_FIELDS: Tuple[str, ...] = (
    "name",
    "city",
    "country",
    "iata",
    "latitude",
    "longitude",
)
ROUTE_FIELDS: Tuple[str, ...] = (
    "airline_id",
    "origin",
    "destination",
)


def record_schema(name: str, fields: Tuple[str, ...]) -> pa.DataFrameSchema:
    """
    Build a schema requiring every positional field to be present.

    The provider nulls the cells a short row never supplied, so a null in a
    required column means the row was too short to decode.
    """
    return pa.DataFrameSchema(
        {
            field: pa.Column(
                nullable=False,
                required=True,
                description=f"{name} field #{position}",
            )
            for position, field in enumerate(fields)
        },
        strict=False,
        name=name,
    )


AirlineRecordSchema = record_schema("AirlineRecordSchema", AIRLINE_FIELDS)
AirportRecordSchema = record_schema("AirportRecordSchema", AIRPORT_FIELDS)
RouteRecordSchema = record_schema("RouteRecordSchema", ROUTE_FIELDS)
