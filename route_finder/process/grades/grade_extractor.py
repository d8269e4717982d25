# Path: route_finder/process/grades/grade_extractor.py
"""
Grade Extractor

Builds the grade vocabulary offered for filtering. Computed once per
dataset load from the unfiltered records.
"""

from typing import Iterable

from route_finder.loaders.route_reader import RouteRecord
from route_finder.process.collation import collation_key
from .grade_matcher import grade_token


def extract_unique_grades(routes: Iterable[RouteRecord]) -> list[str]:
    """
    Collect the distinct grades across all routes.

    Args:
        routes: Route records

    Returns:
        Sorted, de-duplicated grade tokens; routes without a rating
        contribute nothing
    """
    grades = {grade_token(route.rating) for route in routes if route.rating}
    return sorted(grades, key=collation_key)


__all__ = ['extract_unique_grades']
