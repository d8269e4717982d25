# Path: route_finder/loaders/__init__.py
"""
route_finder Loaders Package

INPUT layer: acquisition and interpretation of route data.

Separation: Acquisition (route_data.py) vs Interpretation (route_reader.py)

Example:
    from route_finder.loaders import RouteDataLoader, parse_routes

    loader = RouteDataLoader(config)
    routes = parse_routes(loader.read_text('route-finder.csv'))
"""

from .route_data import RouteDataLoader
from .route_reader import RouteRecord, parse_routes
from .constants import EXPECTED_COLUMNS


__all__ = [
    'RouteDataLoader',
    'RouteRecord',
    'parse_routes',
    'EXPECTED_COLUMNS',
]
