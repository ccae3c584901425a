"""Keyed list comparison.

Splits a target list into items that match a source list by key and
items that do not.
"""

from .entities import KeyedComparison
from .services import compare_by_key

__all__ = [
    "KeyedComparison",
    "compare_by_key",
]
