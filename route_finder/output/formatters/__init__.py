# Path: route_finder/output/formatters/__init__.py
"""
Tree Formatters

Each formatter renders a location tree into a specific output format.
Formatters know nothing about parsing or filtering.
"""

from .base_formatter import BaseFormatter, FormatterRegistry
from .json_formatter import JsonFormatter
from .text_formatter import TextFormatter

FormatterRegistry.register(TextFormatter)
FormatterRegistry.register(JsonFormatter)

__all__ = [
    'BaseFormatter',
    'FormatterRegistry',
    'JsonFormatter',
    'TextFormatter',
]
