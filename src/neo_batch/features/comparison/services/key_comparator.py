"""Keyed set-difference/join between two lists."""

from typing import Any, Callable, Dict, Iterable, Optional, TypeVar

from ..entities import KeyedComparison

T = TypeVar("T")
U = TypeVar("U")
R = TypeVar("R")


def compare_by_key(
    source_list: Iterable[T],
    target_list: Iterable[U],
    source_key: Callable[[T], Any],
    target_key: Callable[[U], Any],
    transform_found: Optional[Callable[[T, U], R]] = None,
) -> KeyedComparison:
    """Compare two lists by key.

    Keys from both selectors are coerced with ``str`` so ``1`` and ``"1"``
    match. When several source items share a key, the last one wins.

    Args:
        source_list: Items to build the lookup from
        target_list: Items to classify, traversed once
        source_key: Key selector for source items
        target_key: Key selector for target items
        transform_found: Optional (source_item, target_item) -> result for matches

    Returns:
        KeyedComparison with matched source items (or transformed results) in
        ``found`` and unmatched target items in ``not_found``
    """
    lookup: Dict[str, T] = {str(source_key(item)): item for item in source_list}

    found = []
    not_found = []
    for target_item in target_list:
        key = str(target_key(target_item))
        if key not in lookup:
            not_found.append(target_item)
            continue

        source_item = lookup[key]
        if transform_found is not None:
            found.append(transform_found(source_item, target_item))
        else:
            found.append(source_item)

    return KeyedComparison(found=found, not_found=not_found)
