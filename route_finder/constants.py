# Path: route_finder/constants.py
"""
System-Wide Constants for route_finder

Central repository for display and logging constants shared by the
CLI and formatters. Data-shape constants live next to the code that
uses them (loaders/constants.py, process/hierarchy/constants.py).
"""

from enum import Enum
from typing import Final


# ==============================================================================
# OUTPUT FORMATS
# ==============================================================================

class OutputFormat(str, Enum):
    """Tree output formats."""
    TEXT = 'text'
    JSON = 'json'


# ==============================================================================
# DISPLAY
# ==============================================================================

# Menu formatting
MENU_WIDTH: Final[int] = 60
MENU_SEPARATOR: Final[str] = '-' * MENU_WIDTH
MENU_HEADER: Final[str] = '=' * MENU_WIDTH

# Status indicators (ASCII only - no emojis)
STATUS_OK: Final[str] = '[OK]'
STATUS_FAIL: Final[str] = '[FAIL]'
STATUS_WARN: Final[str] = '[WARN]'
STATUS_INFO: Final[str] = '[INFO]'


# ==============================================================================
# LOGGING CATEGORIES
# ==============================================================================

class LogCategory(str, Enum):
    """
    IPO logging categories for route_finder.
    """
    INPUT = 'input'
    PROCESS = 'process'
    OUTPUT = 'output'


# ==============================================================================
# EXPORTS
# ==============================================================================

__all__ = [
    'OutputFormat',
    'LogCategory',
    'MENU_WIDTH',
    'MENU_SEPARATOR',
    'MENU_HEADER',
    'STATUS_OK',
    'STATUS_FAIL',
    'STATUS_WARN',
    'STATUS_INFO',
]
