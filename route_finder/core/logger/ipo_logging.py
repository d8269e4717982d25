# Path: route_finder/core/logger/ipo_logging.py
"""
IPO-Aware Logging for route_finder

Input-Process-Output separated logging.

This module sets up logging with separate files for:
- INPUT layer (source loader, CSV parser, CLI)
- PROCESS layer (grade filtering, tree building, session)
- OUTPUT layer (tree formatters)
- Full activity (everything combined)

File logging is optional; without a log directory only the console
handler is installed.
"""

import logging
import sys
from pathlib import Path
from typing import Optional

from route_finder.constants import LogCategory


LOG_FORMAT = '[%(asctime)s] [%(levelname)s] %(name)s - %(message)s'
CONSOLE_FORMAT = '[%(levelname)s] %(name)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


class IPOFilter(logging.Filter):
    """Filter logs by IPO layer prefix."""

    def __init__(self, layer: str):
        """
        Initialize filter for specific IPO layer.

        Args:
            layer: 'input', 'process', or 'output'
        """
        super().__init__()
        self.layer = layer

    def filter(self, record: logging.LogRecord) -> bool:
        """Filter records by logger name prefix."""
        return record.name.startswith(self.layer)


def setup_ipo_logging(
    log_dir: Optional[Path] = None,
    log_level: str = 'INFO',
    console_output: bool = True
) -> None:
    """
    Set up IPO-aware logging for route_finder.

    When log_dir is given, creates:
    - input_activity.log (INPUT layer)
    - process_activity.log (PROCESS layer)
    - output_activity.log (OUTPUT layer)
    - full_activity.log (all activities combined)

    Args:
        log_dir: Directory for log files, or None for console only
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        console_output: Whether to also output to console (stderr)

    Example:
        setup_ipo_logging(
            log_dir=Path('~/.route_finder/logs').expanduser(),
            log_level='INFO',
            console_output=True
        )
    """
    level = getattr(logging, log_level.upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Clear any existing handlers
    root_logger.handlers.clear()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    if log_dir is not None:
        log_dir.mkdir(parents=True, exist_ok=True)

        full_handler = logging.FileHandler(log_dir / 'full_activity.log')
        full_handler.setLevel(logging.DEBUG)
        full_handler.setFormatter(formatter)
        root_logger.addHandler(full_handler)

        for category in LogCategory:
            layer = category.value
            handler = logging.FileHandler(log_dir / f'{layer}_activity.log')
            handler.setLevel(logging.DEBUG)
            handler.setFormatter(formatter)
            handler.addFilter(IPOFilter(layer))
            root_logger.addHandler(handler)

    # Console on stderr; stdout is reserved for tree output
    if console_output:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(level)
        console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
        root_logger.addHandler(console_handler)


def get_input_logger(name: str) -> logging.Logger:
    """
    Get logger for INPUT layer.

    Args:
        name: Logger name (e.g., 'route_reader', 'route_data')

    Returns:
        Logger configured for INPUT layer

    Example:
        logger = get_input_logger('route_reader')
        logger.info("Parsing route CSV")
    """
    return logging.getLogger(f'{LogCategory.INPUT.value}.{name}')


def get_process_logger(name: str) -> logging.Logger:
    """
    Get logger for PROCESS layer.

    Args:
        name: Logger name (e.g., 'grade_filter', 'tree_builder')

    Returns:
        Logger configured for PROCESS layer
    """
    return logging.getLogger(f'{LogCategory.PROCESS.value}.{name}')


def get_output_logger(name: str) -> logging.Logger:
    """
    Get logger for OUTPUT layer.

    Args:
        name: Logger name (e.g., 'text_formatter')

    Returns:
        Logger configured for OUTPUT layer
    """
    return logging.getLogger(f'{LogCategory.OUTPUT.value}.{name}')


__all__ = [
    'IPOFilter',
    'setup_ipo_logging',
    'get_input_logger',
    'get_process_logger',
    'get_output_logger',
]
