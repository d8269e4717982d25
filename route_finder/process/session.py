# Path: route_finder/process/session.py
"""
Route Finder Session - owner of one in-memory dataset.

Holds the parsed routes, the grade vocabulary, the current grade
selection and the tree built from them. Every dataset load or selection
change re-runs the pipeline and replaces the tree wholesale:

    text -> parse_routes -> routes -> extract_unique_grades (on load)
                                   -> filter_routes_by_grades
                                   -> LocationTreeBuilder.build -> tree

A failed load clears the dataset; a stale tree is never kept.

Example:
    session = RouteFinderSession()
    result = session.load_source('route-finder.csv')
    if result.success:
        session.toggle_grade('5.10a')
        print(session.tree.total_routes)
    else:
        print(result.error)
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Optional, Union

from route_finder.core.logger import get_process_logger
from route_finder.exceptions import ParseError, SourceError
from route_finder.loaders.route_data import RouteDataLoader
from route_finder.loaders.route_reader import RouteRecord, parse_routes
from route_finder.process.grades import extract_unique_grades, filter_routes_by_grades
from route_finder.process.hierarchy import LocationNode, LocationTreeBuilder


MSG_UPDATE_FAILED = 'Failed to update filters'


@dataclass
class LoadResult:
    """
    Outcome of a dataset load.

    Attributes:
        success: Whether routes were loaded
        route_count: Number of parsed routes
        grades: Grade vocabulary of the new dataset
        error: Human-readable failure message
    """
    success: bool
    route_count: int = 0
    grades: list[str] = field(default_factory=list)
    error: Optional[str] = None


class RouteFinderSession:
    """
    Single-owner state for one route dataset.
    """

    def __init__(self, loader: Optional[RouteDataLoader] = None):
        """
        Initialize an empty session.

        Args:
            loader: Source loader for load_source(); created on demand
        """
        self._loader = loader
        self._builder = LocationTreeBuilder()
        self.logger = get_process_logger('session')

        self._routes: list[RouteRecord] = []
        self._available_grades: list[str] = []
        self._selected_grades: list[str] = []
        self._tree: Optional[LocationNode] = None
        self._error: Optional[str] = None

    # =========================================================================
    # STATE
    # =========================================================================

    @property
    def routes(self) -> list[RouteRecord]:
        """Routes of the loaded dataset, unfiltered."""
        return list(self._routes)

    @property
    def available_grades(self) -> list[str]:
        """Grade vocabulary of the loaded dataset."""
        return list(self._available_grades)

    @property
    def selected_grades(self) -> list[str]:
        """Active grade selection, in the order grades were picked."""
        return list(self._selected_grades)

    @property
    def tree(self) -> Optional[LocationNode]:
        """Current location tree, None when nothing is loaded."""
        return self._tree

    @property
    def error(self) -> Optional[str]:
        """Message of the last failure, cleared by a successful load."""
        return self._error

    @property
    def has_data(self) -> bool:
        """True when a tree is available to display."""
        return self._tree is not None

    # =========================================================================
    # LOADING
    # =========================================================================

    def load_source(self, source: Optional[Union[str, Path]] = None) -> LoadResult:
        """
        Acquire and load a dataset from a file path or URL.

        Args:
            source: Path or URL; defaults to the configured source

        Returns:
            LoadResult describing the outcome
        """
        if self._loader is None:
            self._loader = RouteDataLoader()

        try:
            text = self._loader.read_text(source)
        except SourceError as e:
            return self._fail(str(e))

        return self.load_text(text)

    def load_text(self, text: str) -> LoadResult:
        """
        Load a dataset from CSV text.

        Args:
            text: Route-finder CSV document

        Returns:
            LoadResult describing the outcome
        """
        try:
            routes = parse_routes(text)
        except ParseError as e:
            return self._fail(str(e))

        self._routes = routes
        self._available_grades = extract_unique_grades(routes)
        self._error = None
        self._rebuild()

        self.logger.info(
            f"Loaded {len(routes)} routes, {len(self._available_grades)} grades"
        )
        return LoadResult(
            success=True,
            route_count=len(routes),
            grades=self.available_grades,
        )

    # =========================================================================
    # FILTERING
    # =========================================================================

    def toggle_grade(self, grade: str) -> None:
        """Add a grade to the selection, or remove it if already selected."""
        if grade in self._selected_grades:
            self._selected_grades = [g for g in self._selected_grades if g != grade]
        else:
            self._selected_grades = self._selected_grades + [grade]
        self._refresh()

    def select_grades(self, grades: Iterable[str]) -> None:
        """Replace the selection; duplicates are dropped, first order kept."""
        selected: list[str] = []
        for grade in grades:
            if grade not in selected:
                selected.append(grade)
        self._selected_grades = selected
        self._refresh()

    def clear_filters(self) -> None:
        """Empty the selection, showing every route again."""
        self._selected_grades = []
        self._refresh()

    # =========================================================================
    # INTERNALS
    # =========================================================================

    def _refresh(self) -> None:
        """Rebuild after a selection change, if a dataset is loaded."""
        if not self._routes:
            return
        try:
            self._rebuild()
        except Exception as e:
            self.logger.exception("Tree rebuild failed")
            self._error = f"{MSG_UPDATE_FAILED}: {e}"

    def _rebuild(self) -> None:
        """Run filter and tree build, publishing a new tree."""
        filtered = filter_routes_by_grades(self._routes, self._selected_grades)
        self._tree = self._builder.build(filtered)

    def _fail(self, message: str) -> LoadResult:
        """Record a failed load and drop any previous dataset."""
        self.logger.error(message)
        self._routes = []
        self._available_grades = []
        self._tree = None
        self._error = message
        return LoadResult(success=False, error=message)


__all__ = ['RouteFinderSession', 'LoadResult']
