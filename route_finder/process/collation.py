# Path: route_finder/process/collation.py
"""
Sort key shared by grade and location ordering.

Names are ordered with the Unicode Collation Algorithm (root locale):
accents and case only break ties between otherwise equal names, so
'Éldorado' sorts with the E's and 'boulder' comes right before
'Boulder'. Punctuation has its own order, e.g. '5.10-' < '5.10+'.
"""

from typing import Optional

from pyuca import Collator


_collator: Optional[Collator] = None


def _get_collator() -> Collator:
    """Load the collation table once, on first use."""
    global _collator
    if _collator is None:
        _collator = Collator()
    return _collator


def collation_key(value: str) -> tuple[tuple[int, ...], str]:
    """
    Locale-aware sort key for names and grade tokens.

    The raw value is a final tie-break for strings the collation
    table considers equal (e.g. ones differing only in ignorable
    characters).
    """
    return (_get_collator().sort_key(value), value)


__all__ = ['collation_key']
