# Path: route_finder/process/grades/grade_matcher.py
"""
Grade Matcher

A rating is a compound token: the grade, then optional protection or
risk information after the first space ('5.10a PG13', '5.9 R').
Only the grade part takes part in matching.
"""

from typing import Optional


GRADE_SEPARATOR = ' '


def grade_token(rating: Optional[str]) -> str:
    """
    Extract the grade from a rating.

    Args:
        rating: Rating text, e.g. '5.10a PG13'

    Returns:
        Text before the first space, or the whole rating ('' for None)
    """
    if not rating:
        return ''
    return rating.split(GRADE_SEPARATOR, 1)[0]


def matches_grade(rating: Optional[str], target_grade: str) -> bool:
    """
    Check whether a rating belongs to a grade.

    Comparison is exact and case-sensitive: '5.9' does not match '5.9+'.

    Args:
        rating: Rating text of a route
        target_grade: Grade token to match

    Returns:
        True if the rating's grade equals target_grade
    """
    if not rating:
        return False
    return grade_token(rating) == target_grade


__all__ = ['GRADE_SEPARATOR', 'grade_token', 'matches_grade']
