# Path: route_finder/output/formatters/json_formatter.py
"""
JSON Formatter

Renders a location tree as structured JSON for downstream tools.
Route fields keep the CSV column names.
"""

import json
from typing import Any, Dict, Sequence

from route_finder.process.hierarchy import LocationNode
from .base_formatter import BaseFormatter


class JsonFormatter(BaseFormatter):
    """Renders a location tree as JSON."""

    def __init__(self, indent: int = 2):
        self.indent = indent

    @property
    def format_name(self) -> str:
        return 'json'

    @property
    def file_extension(self) -> str:
        return '.json'

    def format_tree(
        self,
        tree: LocationNode,
        selected_grades: Sequence[str] = ()
    ) -> str:
        """Serialize tree to JSON string."""
        data = self._serialize(tree, selected_grades)
        return json.dumps(data, indent=self.indent, ensure_ascii=False)

    def _serialize(
        self,
        tree: LocationNode,
        selected_grades: Sequence[str]
    ) -> Dict[str, Any]:
        """Wrap the tree with the selection it was built for."""
        return {
            'selected_grades': list(selected_grades),
            'total_routes': tree.total_routes,
            'tree': tree.to_dict(),
        }


__all__ = ['JsonFormatter']
