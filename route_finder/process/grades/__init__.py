# Path: route_finder/process/grades/__init__.py
"""
Grade handling for route_finder.

Components:
- grade_token / matches_grade: grade predicate
- extract_unique_grades: grade vocabulary for a dataset
- filter_routes_by_grades: OR-combined grade filter
"""

from .grade_matcher import grade_token, matches_grade
from .grade_extractor import extract_unique_grades
from .grade_filter import filter_routes_by_grades

__all__ = [
    'grade_token',
    'matches_grade',
    'extract_unique_grades',
    'filter_routes_by_grades',
]
