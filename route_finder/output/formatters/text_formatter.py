# Path: route_finder/output/formatters/text_formatter.py
"""
Text Formatter

Renders a location tree as an outline, like the 'tree' command:

    +-- The Dome (2 routes)
    |   `-- Boulder Canyon (2 routes)
    |       `-- Colorado (2 routes)
    |               - East Slab
    |                 *** (2.6) | Trad | Grade: 5.9 | Pitches: 1 | Length: 120ft
    |                 40.0050, -105.3400 | https://...
    `-- Wall of Winter (1 route)

Nodes deeper than expand_levels are shown collapsed: name and route
count only, no routes or children.
"""

import math
from typing import Optional, Sequence

from route_finder.constants import MENU_HEADER, MENU_SEPARATOR
from route_finder.loaders.route_reader import RouteRecord
from route_finder.process.hierarchy import LocationNode
from .base_formatter import BaseFormatter

TITLE = 'Climbing Routes'
NO_ROUTES = 'No routes match the selected grades.'


class TextFormatter(BaseFormatter):
    """Renders a location tree as ASCII (or Unicode) text."""

    # Tree drawing characters
    BRANCH = '+-- '
    LAST_BRANCH = '`-- '
    PIPE = '|   '
    SPACE = '    '
    ROUTE_BULLET = '- '
    STAR = '*'

    def __init__(self, use_unicode: bool = False, expand_levels: Optional[int] = None):
        """
        Initialize formatter.

        Args:
            use_unicode: Use Unicode box-drawing chars instead of ASCII
            expand_levels: Depth below the root shown expanded; None
                expands everything
        """
        if use_unicode:
            self.BRANCH = '├── '
            self.LAST_BRANCH = '└── '
            self.PIPE = '│   '
            self.SPACE = '    '
            self.ROUTE_BULLET = '• '
            self.STAR = '★'
        self.expand_levels = expand_levels

    @property
    def format_name(self) -> str:
        return 'text'

    @property
    def file_extension(self) -> str:
        return '.txt'

    def format_tree(
        self,
        tree: LocationNode,
        selected_grades: Sequence[str] = ()
    ) -> str:
        """Render header plus outline."""
        lines = [MENU_HEADER, f"  {TITLE}", MENU_HEADER]
        lines.append(f"  Routes: {tree.total_routes}")
        grades = ', '.join(selected_grades) if selected_grades else 'all'
        lines.append(f"  Grades: {grades}")
        lines.append(MENU_SEPARATOR)

        if tree.total_routes == 0:
            lines.append(NO_ROUTES)
        else:
            for i, child in enumerate(tree.children):
                is_last = i == len(tree.children) - 1
                lines.extend(self._format_node(child, '', is_last, depth=1))

        lines.append('')
        return '\n'.join(lines)

    def _format_node(
        self,
        node: LocationNode,
        prefix: str,
        is_last: bool,
        depth: int
    ) -> list[str]:
        """
        Recursively format a node, its routes and its children.

        Args:
            node: Node to format
            prefix: Current line prefix for indentation
            is_last: Whether this is the last child of its parent
            depth: Depth below the root (root children are 1)

        Returns:
            List of formatted lines
        """
        connector = self.LAST_BRANCH if is_last else self.BRANCH
        lines = [f"{prefix}{connector}{self._node_label(node)}"]

        if not self._is_expanded(depth):
            return lines

        child_prefix = prefix + (self.SPACE if is_last else self.PIPE)
        route_prefix = child_prefix + (self.SPACE if node.is_leaf else self.PIPE)

        for route in node.routes:
            lines.extend(self._format_route(route, route_prefix))

        for i, child in enumerate(node.children):
            is_child_last = i == len(node.children) - 1
            lines.extend(self._format_node(child, child_prefix, is_child_last, depth + 1))

        return lines

    def _is_expanded(self, depth: int) -> bool:
        """Nodes above the expand limit show their contents."""
        return self.expand_levels is None or depth < self.expand_levels

    @staticmethod
    def _node_label(node: LocationNode) -> str:
        """Node name with recursive route count."""
        total = node.total_routes
        return f"{node.name} ({total} route{'' if total == 1 else 's'})"

    def _format_route(self, route: RouteRecord, prefix: str) -> list[str]:
        """Render one route card."""
        details = []
        if route.avg_stars is not None:
            stars = self.STAR * int(math.floor(route.avg_stars + 0.5))
            details.append(f"{stars} ({route.avg_stars:g})".lstrip())
        if route.route_type:
            details.append(route.route_type)
        details.append(f"Grade: {route.rating}")
        if route.pitches is not None:
            details.append(f"Pitches: {route.pitches}")
        if route.length:
            details.append(f"Length: {route.length:g}ft")

        lines = [
            f"{prefix}{self.ROUTE_BULLET}{route.name}",
            f"{prefix}  {' | '.join(details)}",
        ]

        footer = []
        if route.area_latitude is not None and route.area_longitude is not None:
            footer.append(f"{route.area_latitude:.4f}, {route.area_longitude:.4f}")
        if route.url:
            footer.append(route.url)
        if footer:
            lines.append(f"{prefix}  {' | '.join(footer)}")

        return lines


__all__ = ['TextFormatter']
