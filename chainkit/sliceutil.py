"""Small helpers for working with sequences."""

from __future__ import annotations

from typing import Callable, Hashable, Iterable, Sequence, TypeVar

T = TypeVar("T")
U = TypeVar("U")
H = TypeVar("H", bound=Hashable)


def copy_items(items: Iterable[T]) -> list[T]:
    """Return a shallow copy of ``items`` as a new list."""
    return list(items)


def contains(items: Iterable[T], element: T) -> bool:
    """Return True if ``element`` is in ``items``."""
    return element in items


def contains_all(items: Sequence[T], elements: Iterable[T]) -> bool:
    """Return True if every one of ``elements`` is in ``items``."""
    return all(element in items for element in elements)


def map_items(items: Iterable[T], func: Callable[[T], U]) -> list[U]:
    """Return a new list holding ``func`` applied to each item."""
    return [func(item) for item in items]


def filter_items(items: Iterable[T], predicate: Callable[[T], bool]) -> list[T]:
    """Return a new list of the items that satisfy ``predicate``."""
    return [item for item in items if predicate(item)]


def is_unique(items: Iterable[H]) -> bool:
    """Return True if no element occurs more than once."""
    seen: set[H] = set()
    for item in items:
        if item in seen:
            return False
        seen.add(item)
    return True


def intersect(*args: Sequence[T]) -> list[T]:
    """Return the elements of the shortest sequence that occur in all sequences."""
    if not args:
        return []
    shortest = min(args, key=len)
    return [item for item in shortest if all(item in other for other in args)]


def unique(*args: Iterable[H]) -> list[H]:
    """Return the distinct elements of all sequences, in first-seen order."""
    return list(dict.fromkeys(item for items in args for item in items))


def index_of(items: Iterable[T], element: T) -> int:
    """Return the index of the first occurrence of ``element``, or -1."""
    for index, item in enumerate(items):
        if item == element:
            return index
    return -1


def append_unique(items: Sequence[T], element: T) -> list[T]:
    """Return ``items`` as a list with ``element`` appended unless already present."""
    result = list(items)
    if element not in result:
        result.append(element)
    return result