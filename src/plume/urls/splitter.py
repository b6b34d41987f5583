"""Greedy, order-preserving group splitting.

Packs items left to right into as few groups as a single forward scan
allows. Items are never reordered or shared between groups; asset order
usually encodes load order.
"""

from collections.abc import Callable, Iterable, Iterator, Sequence
from typing import TypeVar

from plume.errors import GroupOverflowError

T = TypeVar("T")


def split_groups(items: Iterable[T], fits: Callable[[Sequence[T]], bool]) -> Iterator[list[T]]:
    """Yield consecutive, non-empty groups of *items* that each satisfy *fits*.

    *fits* receives a candidate group and reports whether it is within
    bounds. When appending an item breaks the bound, the current group is
    closed without it and the item starts the next group.

    Raises ``GroupOverflowError`` if an item does not fit on its own.
    """
    current: list[T] = []
    for item in items:
        candidate = [*current, item]
        if fits(candidate):
            current = candidate
            continue

        if not current:
            raise GroupOverflowError(item)

        yield current
        current = [item]
        if not fits(current):
            raise GroupOverflowError(item)

    if current:
        yield current
