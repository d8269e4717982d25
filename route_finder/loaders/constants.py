# Path: route_finder/loaders/constants.py
"""
Loaders Module Constants for route_finder

Column names of the route-finder CSV export and the field each one
maps to. The header is fixed; no schema negotiation is done.
"""

from typing import Final


# ==============================================================================
# CSV COLUMNS
# ==============================================================================

COLUMN_ROUTE: Final[str] = 'Route'
COLUMN_LOCATION: Final[str] = 'Location'
COLUMN_URL: Final[str] = 'URL'
COLUMN_AVG_STARS: Final[str] = 'Avg Stars'
COLUMN_YOUR_STARS: Final[str] = 'Your Stars'
COLUMN_ROUTE_TYPE: Final[str] = 'Route Type'
COLUMN_RATING: Final[str] = 'Rating'
COLUMN_PITCHES: Final[str] = 'Pitches'
COLUMN_LENGTH: Final[str] = 'Length'
COLUMN_AREA_LATITUDE: Final[str] = 'Area Latitude'
COLUMN_AREA_LONGITUDE: Final[str] = 'Area Longitude'

# Header order as exported
EXPECTED_COLUMNS: Final[tuple[str, ...]] = (
    COLUMN_ROUTE,
    COLUMN_LOCATION,
    COLUMN_URL,
    COLUMN_AVG_STARS,
    COLUMN_YOUR_STARS,
    COLUMN_ROUTE_TYPE,
    COLUMN_RATING,
    COLUMN_PITCHES,
    COLUMN_LENGTH,
    COLUMN_AREA_LATITUDE,
    COLUMN_AREA_LONGITUDE,
)

# Column -> RouteRecord attribute
COLUMN_FIELD_MAP: Final[dict[str, str]] = {
    COLUMN_ROUTE: 'name',
    COLUMN_LOCATION: 'location',
    COLUMN_URL: 'url',
    COLUMN_AVG_STARS: 'avg_stars',
    COLUMN_YOUR_STARS: 'your_stars',
    COLUMN_ROUTE_TYPE: 'route_type',
    COLUMN_RATING: 'rating',
    COLUMN_PITCHES: 'pitches',
    COLUMN_LENGTH: 'length',
    COLUMN_AREA_LATITUDE: 'area_latitude',
    COLUMN_AREA_LONGITUDE: 'area_longitude',
}

# Typed columns. Rating stays text.
FLOAT_COLUMNS: Final[frozenset[str]] = frozenset({
    COLUMN_AVG_STARS,
    COLUMN_YOUR_STARS,
    COLUMN_LENGTH,
    COLUMN_AREA_LATITUDE,
    COLUMN_AREA_LONGITUDE,
})
INT_COLUMNS: Final[frozenset[str]] = frozenset({COLUMN_PITCHES})


# ==============================================================================
# SOURCE DETECTION
# ==============================================================================

CSV_EXTENSION: Final[str] = '.csv'
URL_SCHEMES: Final[tuple[str, ...]] = ('http://', 'https://')
UTF8_BOM: Final[str] = '\ufeff'

# Messages shown to the user
MSG_NOT_CSV: Final[str] = 'Please upload a CSV file'
MSG_READ_FAILED: Final[str] = 'Failed to read file'
MSG_FETCH_FAILED: Final[str] = 'Failed to load data. Please check your internet connection.'
MSG_PARSE_PREFIX: Final[str] = 'Failed to parse CSV: '

# HTTP
HTTP_USER_AGENT: Final[str] = 'route-finder/1.0'


__all__ = [
    'COLUMN_ROUTE',
    'COLUMN_LOCATION',
    'COLUMN_URL',
    'COLUMN_AVG_STARS',
    'COLUMN_YOUR_STARS',
    'COLUMN_ROUTE_TYPE',
    'COLUMN_RATING',
    'COLUMN_PITCHES',
    'COLUMN_LENGTH',
    'COLUMN_AREA_LATITUDE',
    'COLUMN_AREA_LONGITUDE',
    'EXPECTED_COLUMNS',
    'COLUMN_FIELD_MAP',
    'FLOAT_COLUMNS',
    'INT_COLUMNS',
    'CSV_EXTENSION',
    'URL_SCHEMES',
    'UTF8_BOM',
    'MSG_NOT_CSV',
    'MSG_READ_FAILED',
    'MSG_FETCH_FAILED',
    'MSG_PARSE_PREFIX',
    'HTTP_USER_AGENT',
]
