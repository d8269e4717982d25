# Path: route_finder/core/logger/__init__.py
"""
route_finder Logger Package

IPO-aware logging for the route finder.

Provides separate log streams for:
- INPUT layer (loaders, CLI)
- PROCESS layer (filtering, tree building)
- OUTPUT layer (formatters)
"""

from .ipo_logging import (
    setup_ipo_logging,
    get_input_logger,
    get_process_logger,
    get_output_logger,
)

__all__ = [
    'setup_ipo_logging',
    'get_input_logger',
    'get_process_logger',
    'get_output_logger',
]
