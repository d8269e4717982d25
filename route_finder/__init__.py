# Path: route_finder/__init__.py
"""
route_finder - Climbing Route Finder

Reads a route-finder CSV export, extracts the grade vocabulary, filters
routes by grade and folds them into a browsable location tree.

Layers:
    INPUT:   loaders (source acquisition, CSV record parsing)
    PROCESS: grades (matching, extraction, filtering), hierarchy (tree
             building), session (state owner for one dataset)
    OUTPUT:  formatters (text outline, JSON)
"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("route-finder")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"

__all__ = ['__version__']
