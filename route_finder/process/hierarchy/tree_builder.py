# Path: route_finder/process/hierarchy/tree_builder.py
"""
Location Tree Builder - folds route records into a location hierarchy.

Locations are stored broadest region first
('Colorado > Boulder Canyon > The Dome') but the tree is built LEAF
FIRST: the path is reversed, so the most specific place sits directly
under the root and the broadest region is the deepest node, which is
where the route is attached:

    <root>
    `-- The Dome
        `-- Boulder Canyon
            `-- Colorado        <- route

After placement, empty branches are pruned bottom-up and every level is
sorted by name. Route order within a node follows input order.

Example:
    builder = LocationTreeBuilder()
    root = builder.build(routes)
    print(builder.placed_count, builder.skipped_count)
"""

from typing import Iterable

from route_finder.core.logger import get_process_logger
from route_finder.loaders.route_reader import RouteRecord
from route_finder.process.collation import collation_key
from route_finder.process.hierarchy.constants import LOCATION_SEPARATOR
from route_finder.process.hierarchy.node import LocationNode


logger = get_process_logger('tree_builder')


def split_location(location: str) -> list[str]:
    """
    Split a location into tree path segments, leaf segment first.

    Args:
        location: 'Region > Area > Crag' style path

    Returns:
        Non-empty segments in reverse order
    """
    if not location:
        return []
    segments = [part for part in location.split(LOCATION_SEPARATOR) if part]
    segments.reverse()
    return segments


class LocationTreeBuilder:
    """
    Builds a fresh location tree per call.

    Keeps statistics about the most recent build for diagnostics.
    """

    def __init__(self):
        """Initialize the tree builder."""
        self.build_count = 0
        self.placed_count = 0
        self.skipped_count = 0

    def build(self, routes: Iterable[RouteRecord]) -> LocationNode:
        """
        Build the location tree for a collection of routes.

        Args:
            routes: Route records, usually already grade-filtered

        Returns:
            Root node (name '') of a newly allocated tree
        """
        root = LocationNode()
        placed = 0
        skipped = 0

        for route in routes:
            segments = split_location(route.location)
            if not segments:
                skipped += 1
                continue

            node = root
            for segment in segments:
                node = self._get_or_add_child(node, segment)
            node.routes.append(route)
            placed += 1

        prune_empty_nodes(root)
        sort_tree_nodes(root)

        self.build_count += 1
        self.placed_count = placed
        self.skipped_count = skipped
        logger.debug(
            f"Built location tree: {placed} routes placed, "
            f"{skipped} without location, {root.node_count - 1} locations"
        )
        return root

    @staticmethod
    def _get_or_add_child(parent: LocationNode, name: str) -> LocationNode:
        """Find the child with this exact name or create it."""
        child = parent.find_child(name)
        if child is None:
            child = LocationNode(name=name)
            parent.children.append(child)
        return child


def prune_empty_nodes(node: LocationNode) -> bool:
    """
    Drop empty subtrees bottom-up.

    Args:
        node: Subtree root, modified in place

    Returns:
        True if the node still has children or routes
    """
    node.children = [child for child in node.children if prune_empty_nodes(child)]
    return not node.is_empty


def sort_tree_nodes(node: LocationNode) -> None:
    """Sort children by name at every level, in place."""
    node.children.sort(key=lambda child: collation_key(child.name))
    for child in node.children:
        sort_tree_nodes(child)


def build_location_tree(routes: Iterable[RouteRecord]) -> LocationNode:
    """
    Build a location tree without keeping builder statistics.

    Args:
        routes: Route records

    Returns:
        Root node of a new tree
    """
    return LocationTreeBuilder().build(routes)


__all__ = [
    'LocationTreeBuilder',
    'build_location_tree',
    'split_location',
    'prune_empty_nodes',
    'sort_tree_nodes',
]
