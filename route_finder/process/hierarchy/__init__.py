# Path: route_finder/process/hierarchy/__init__.py
"""
Location Hierarchy Package for route_finder

Builds a navigable tree of places from the Location column of route
records. Paths are walked leaf first (see tree_builder.py).

Components:
- LocationNode: Individual node in the location tree
- LocationTreeBuilder: Builds, prunes and sorts a tree per call
- build_location_tree: One-shot convenience wrapper

Example:
    from route_finder.process.hierarchy import build_location_tree

    root = build_location_tree(routes)
    for crag in root.children:
        print(crag.name, crag.total_routes)
"""

from route_finder.process.hierarchy.constants import LOCATION_SEPARATOR, ROOT_NAME
from route_finder.process.hierarchy.node import LocationNode
from route_finder.process.hierarchy.tree_builder import (
    LocationTreeBuilder,
    build_location_tree,
    split_location,
)

__all__ = [
    'LOCATION_SEPARATOR',
    'ROOT_NAME',
    'LocationNode',
    'LocationTreeBuilder',
    'build_location_tree',
    'split_location',
]
