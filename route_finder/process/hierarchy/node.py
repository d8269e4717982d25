# Path: route_finder/process/hierarchy/node.py
"""
Location Node - Individual node in the route location tree.

Each node is one place name. Routes hang off the node where their
location path ends; intermediate nodes only group children.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterator, Optional

from route_finder.loaders.route_reader import RouteRecord
from route_finder.process.hierarchy.constants import ROOT_NAME


@dataclass
class LocationNode:
    """
    A single node in the location tree.

    Attributes:
        name: One location segment ('' for the root)
        children: Child nodes, unique by name, sorted after building
        routes: Routes whose location ends at this node, in input order

    Example:
        root = LocationNode()
        dome = LocationNode(name='The Dome')
        root.children.append(dome)
    """
    name: str = ROOT_NAME
    children: list[LocationNode] = field(default_factory=list)
    routes: list[RouteRecord] = field(default_factory=list)

    # ===========================================================================
    # RELATIONSHIP QUERIES
    # ===========================================================================
    @property
    def is_root(self) -> bool:
        """Check if this is the (unnamed) root node."""
        return self.name == ROOT_NAME

    @property
    def is_leaf(self) -> bool:
        """Check if this is a leaf node (no children)."""
        return len(self.children) == 0

    @property
    def is_empty(self) -> bool:
        """True when the node has neither routes nor children."""
        return not self.children and not self.routes

    def find_child(self, name: str) -> Optional[LocationNode]:
        """
        Find a direct child by exact (case-sensitive) name.

        Args:
            name: Segment name

        Returns:
            Child node or None
        """
        for child in self.children:
            if child.name == name:
                return child
        return None

    # ===========================================================================
    # TREE ITERATION
    # ===========================================================================
    def iter_preorder(self) -> Iterator[LocationNode]:
        """
        Iterate nodes in pre-order (parent before children).

        Yields:
            Nodes in pre-order traversal
        """
        yield self
        for child in self.children:
            yield from child.iter_preorder()

    # ===========================================================================
    # STATISTICS
    # ===========================================================================
    @property
    def child_count(self) -> int:
        """Number of direct children."""
        return len(self.children)

    @property
    def total_routes(self) -> int:
        """Routes at this node plus all descendants."""
        return len(self.routes) + sum(child.total_routes for child in self.children)

    @property
    def node_count(self) -> int:
        """Number of nodes in this subtree, including this one."""
        return sum(1 for _ in self.iter_preorder())

    # ===========================================================================
    # CONVERSION AND REPRESENTATION
    # ===========================================================================
    def to_dict(self) -> dict[str, Any]:
        """
        Convert subtree to a JSON-ready dictionary.

        Returns:
            Dictionary with name, total_routes, routes and children
        """
        return {
            'name': self.name,
            'total_routes': self.total_routes,
            'routes': [route.to_dict() for route in self.routes],
            'children': [child.to_dict() for child in self.children],
        }

    def __str__(self) -> str:
        """String representation."""
        label = '<root>' if self.is_root else self.name
        return f"{label} ({self.total_routes} routes, {self.child_count} children)"


__all__ = ['LocationNode']
