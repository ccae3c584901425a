"""Result entity of a keyed list comparison."""

from dataclasses import dataclass, field
from typing import Any, Generic, Iterator, List, TypeVar

R = TypeVar("R")
U = TypeVar("U")


@dataclass(frozen=True)
class KeyedComparison(Generic[R, U]):
    """Target items split into matched and unmatched.

    Both lists follow the traversal order of the target list. The result
    unpacks as ``found, not_found = comparison``.
    """

    found: List[R] = field(default_factory=list)
    not_found: List[U] = field(default_factory=list)

    @property
    def found_count(self) -> int:
        """Number of target items with a matching source item."""
        return len(self.found)

    @property
    def not_found_count(self) -> int:
        """Number of target items without a match."""
        return len(self.not_found)

    @property
    def all_found(self) -> bool:
        """Check if every target item matched."""
        return not self.not_found

    def __iter__(self) -> Iterator[List[Any]]:
        yield self.found
        yield self.not_found
