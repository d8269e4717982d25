# Path: route_finder/loaders/route_reader.py
"""
Route Reader for route_finder

Interprets route-finder CSV text into typed RouteRecord objects.
Does NOT acquire the text - that's for route_data.py.

Parsing is all-or-nothing: any structural problem (unterminated quote,
ragged row, missing column) raises ParseError and no records are
returned, so a silently incomplete dataset is never shown.
"""

import csv
import io
import math
from dataclasses import dataclass
from typing import Optional

from route_finder.core.logger import get_input_logger
from route_finder.exceptions import ParseError
from .constants import (
    COLUMN_FIELD_MAP,
    COLUMN_RATING,
    EXPECTED_COLUMNS,
    FLOAT_COLUMNS,
    INT_COLUMNS,
    MSG_PARSE_PREFIX,
    UTF8_BOM,
)


logger = get_input_logger('route_reader')


@dataclass(frozen=True)
class RouteRecord:
    """
    One parsed row of the route-finder export.

    Attributes:
        name: Route name
        location: Place names joined by ' > ', broadest region first
        url: Route page URL
        avg_stars: Community star rating
        your_stars: Personal star rating
        route_type: e.g. 'Trad', 'Sport, TR'
        rating: Grade plus optional protection suffix, e.g. '5.10a PG13'
        pitches: Number of pitches
        length: Length in feet, None when unknown
        area_latitude: Latitude of the containing area
        area_longitude: Longitude of the containing area
    """
    name: str = ''
    location: str = ''
    url: str = ''
    avg_stars: Optional[float] = None
    your_stars: Optional[float] = None
    route_type: str = ''
    rating: str = ''
    pitches: Optional[int] = None
    length: Optional[float] = None
    area_latitude: Optional[float] = None
    area_longitude: Optional[float] = None

    def to_dict(self) -> dict:
        """Convert to dictionary keyed by the CSV column names."""
        return {
            column: getattr(self, attribute)
            for column, attribute in COLUMN_FIELD_MAP.items()
        }


def parse_routes(text: str) -> list[RouteRecord]:
    """
    Parse route-finder CSV text into records.

    Args:
        text: Full CSV document, header row first

    Returns:
        Records in file order

    Raises:
        ParseError: If the document is structurally malformed
    """
    if text.startswith(UTF8_BOM):
        text = text[len(UTF8_BOM):]

    reader = csv.reader(io.StringIO(text, newline=''), strict=True)
    records: list[RouteRecord] = []

    try:
        header = _read_header(reader)
        width = len(header)

        for row in reader:
            # Only truly empty lines are skipped; ",,," is a record
            if not row:
                continue

            if len(row) != width:
                raise ParseError(
                    f"{MSG_PARSE_PREFIX}row {reader.line_num} has {len(row)} "
                    f"fields, expected {width}",
                    row=reader.line_num,
                )

            records.append(_build_record(dict(zip(header, row)), reader.line_num))

    except csv.Error as e:
        raise ParseError(
            f"{MSG_PARSE_PREFIX}{e} (row {reader.line_num})",
            row=reader.line_num,
        ) from e

    logger.info(f"Parsed {len(records)} routes")
    return records


def _read_header(reader) -> list[str]:
    """Read and validate the header row."""
    header = None
    for row in reader:
        if row:
            header = [cell.strip() for cell in row]
            break

    if header is None:
        raise ParseError(f"{MSG_PARSE_PREFIX}no header row found", row=None)

    missing = [column for column in EXPECTED_COLUMNS if column not in header]
    if missing:
        raise ParseError(
            f"{MSG_PARSE_PREFIX}missing columns: {', '.join(missing)}",
            row=reader.line_num,
        )

    return header


def _build_record(row: dict[str, str], line_num: int) -> RouteRecord:
    """Map one CSV row onto a RouteRecord with typed fields."""
    values = {}
    for column, attribute in COLUMN_FIELD_MAP.items():
        raw = row.get(column, '')
        if column == COLUMN_RATING:
            values[attribute] = raw.strip() if raw else ''
        elif column in FLOAT_COLUMNS:
            values[attribute] = _to_float(raw, column, line_num)
        elif column in INT_COLUMNS:
            values[attribute] = _to_int(raw, column, line_num)
        else:
            values[attribute] = raw
    return RouteRecord(**values)


def _to_float(raw: str, column: str, line_num: int) -> Optional[float]:
    """Convert a numeric cell; empty or unparsable cells become None."""
    value = raw.strip()
    if not value:
        return None
    try:
        number = float(value)
    except ValueError:
        logger.warning(f"Row {line_num}: non-numeric {column!r} value {raw!r} ignored")
        return None
    if not math.isfinite(number):
        logger.warning(f"Row {line_num}: non-finite {column!r} value {raw!r} ignored")
        return None
    return number


def _to_int(raw: str, column: str, line_num: int) -> Optional[int]:
    """Convert an integer cell, accepting integral floats such as '2.0'."""
    number = _to_float(raw, column, line_num)
    if number is None:
        return None
    if not number.is_integer():
        logger.warning(f"Row {line_num}: fractional {column!r} value {raw!r} ignored")
        return None
    return int(number)


__all__ = ['RouteRecord', 'parse_routes']
