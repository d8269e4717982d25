# Path: route_finder/process/__init__.py
"""
route_finder Process Package

PROCESS layer: everything between parsed records and a renderable tree.

Subpackages:
    - grades: grade matching, vocabulary extraction, grade filter
    - hierarchy: location tree building

Modules:
    - session: RouteFinderSession, the owner of one loaded dataset
"""

from route_finder.process.session import RouteFinderSession, LoadResult

__all__ = ['RouteFinderSession', 'LoadResult']
