# Path: route_finder/process/grades/grade_filter.py
"""
Grade Filter

Keeps routes whose grade matches ANY of the selected grades. An empty
selection means "show everything". Surviving routes keep their order.

Predicate failures never reach the caller: they are logged and the
filter returns an empty list for that call.
"""

from typing import Iterable, Sequence

from route_finder.core.logger import get_process_logger
from route_finder.loaders.route_reader import RouteRecord
from .grade_matcher import matches_grade


logger = get_process_logger('grade_filter')


def filter_routes_by_grades(
    routes: Sequence[RouteRecord],
    selected_grades: Iterable[str]
) -> list[RouteRecord]:
    """
    Filter routes by grade selection (OR across grades).

    Args:
        routes: Route records in display order
        selected_grades: Grade tokens to keep

    Returns:
        All routes when nothing is selected, otherwise the matching
        subsequence; [] if matching failed unexpectedly
    """
    grades = list(selected_grades)
    if not grades:
        return list(routes)

    try:
        filtered = [
            route for route in routes
            if any(matches_grade(route.rating, grade) for grade in grades)
        ]
    except Exception:
        logger.exception("Error during filtering; showing no routes")
        return []

    logger.debug(f"Filtered routes: {len(filtered)} of {len(routes)}")
    return filtered


__all__ = ['filter_routes_by_grades']
