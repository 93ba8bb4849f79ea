"""Iterator helpers."""

from collections.abc import Callable, Iterable, Iterator
from typing import TypeVar

T = TypeVar("T")


def take_until_inclusive(
    iterable: Iterable[T], predicate: Callable[[T], bool]
) -> Iterator[T]:
    """Yield items until ``predicate`` is true, including that item."""
    for item in iterable:
        yield item
        if predicate(item):
            return