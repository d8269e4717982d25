# Path: route_finder/process/hierarchy/constants.py
"""
Constants for the Location Tree Builder
"""

from typing import Final


LOCATION_SEPARATOR: Final[str] = ' > '
"""Separator between place names in a route's Location column."""

ROOT_NAME: Final[str] = ''
"""The root node is unnamed."""


__all__ = ['LOCATION_SEPARATOR', 'ROOT_NAME']
