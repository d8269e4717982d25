# Path: route_finder/output/formatters/base_formatter.py
"""
Base Formatter and Formatter Registry

Abstract base class for tree formatters and a registry to look them up
by format name.

To add a new format (e.g., HTML, Markdown):
1. Subclass BaseFormatter
2. Implement format_tree()
3. Register via FormatterRegistry.register()
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, Optional, Sequence, Type

from route_finder.core.logger import get_output_logger
from route_finder.process.hierarchy import LocationNode


logger = get_output_logger('formatters')


class BaseFormatter(ABC):
    """
    Abstract base for location tree formatters.

    Each subclass renders a LocationNode tree into a specific format.
    """

    @property
    @abstractmethod
    def format_name(self) -> str:
        """Short name for this format (e.g., 'json', 'text')."""

    @property
    @abstractmethod
    def file_extension(self) -> str:
        """File extension including dot (e.g., '.json', '.txt')."""

    @abstractmethod
    def format_tree(
        self,
        tree: LocationNode,
        selected_grades: Sequence[str] = ()
    ) -> str:
        """
        Render a tree to string.

        Args:
            tree: Root node from the tree builder
            selected_grades: Active grade selection, for the header

        Returns:
            Formatted string representation
        """

    def write_tree(
        self,
        tree: LocationNode,
        output_path: Path,
        selected_grades: Sequence[str] = ()
    ) -> Path:
        """
        Write a rendered tree to file.

        Args:
            tree: Root node to render
            output_path: Target file, or a directory to write
                route_tree<ext> into
            selected_grades: Active grade selection

        Returns:
            Path to the written file
        """
        if output_path.is_dir():
            output_path = output_path / f"route_tree{self.file_extension}"
        output_path.parent.mkdir(parents=True, exist_ok=True)

        content = self.format_tree(tree, selected_grades)
        output_path.write_text(content, encoding='utf-8')
        logger.info(f"Wrote {self.format_name} tree to {output_path}")
        return output_path


class FormatterRegistry:
    """
    Registry of available formatters.

    Lookup by format name. The CLI uses this to find the formatter for
    the requested output format.
    """

    _formatters: Dict[str, Type[BaseFormatter]] = {}

    @classmethod
    def register(cls, formatter_class: Type[BaseFormatter]) -> None:
        """Register a formatter class."""
        instance = formatter_class()
        cls._formatters[instance.format_name] = formatter_class

    @classmethod
    def get(cls, format_name: str, **options) -> Optional[BaseFormatter]:
        """Get a formatter instance by name, passing options to it."""
        formatter_class = cls._formatters.get(format_name)
        if formatter_class:
            return formatter_class(**options)
        return None

    @classmethod
    def get_available(cls) -> list[str]:
        """Return list of registered format names."""
        return list(cls._formatters.keys())

    @classmethod
    def clear(cls) -> None:
        """Clear all registrations (for testing)."""
        cls._formatters.clear()


__all__ = ['BaseFormatter', 'FormatterRegistry']
