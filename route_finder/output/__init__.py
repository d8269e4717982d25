# Path: route_finder/output/__init__.py
"""
route_finder Output Package

OUTPUT layer: renders location trees for display or export.
"""

from .formatters import BaseFormatter, FormatterRegistry, JsonFormatter, TextFormatter

__all__ = [
    'BaseFormatter',
    'FormatterRegistry',
    'JsonFormatter',
    'TextFormatter',
]
