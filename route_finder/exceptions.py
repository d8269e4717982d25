# Path: route_finder/exceptions.py
"""
Exception hierarchy for route_finder.

ParseError and SourceError are fatal to a dataset load and carry a
human-readable message for display. Filter failures never surface as
exceptions; the filter stage logs them and returns an empty result.
"""

from typing import Optional


class RouteFinderError(Exception):
    """Base class for all route_finder errors."""


class ParseError(RouteFinderError):
    """
    Raised when route CSV text is structurally malformed.

    Attributes:
        row: 1-based row number of the offending line, if known
    """

    def __init__(self, message: str, row: Optional[int] = None):
        super().__init__(message)
        self.row = row


class SourceError(RouteFinderError):
    """Raised when raw route data cannot be acquired from its source."""


__all__ = ['RouteFinderError', 'ParseError', 'SourceError']
