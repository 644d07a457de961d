"""Splitting a sequence into fixed-size pages."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Generic, TypeVar

T = TypeVar("T")


class Paginator(Generic[T]):
    """Pages of at most ``page_size`` items; only the last page may be shorter."""

    def __init__(self, items: Iterable[T], page_size: int) -> None:
        if page_size <= 0:
            raise ValueError("page_size must be positive")
        data = list(items)
        self._pages = [
            data[start:start + page_size] for start in range(0, len(data), page_size)
        ]

    def __iter__(self) -> Iterator[list[T]]:
        return iter(self._pages)

    def __len__(self) -> int:
        return len(self._pages)


def paginate(items: Iterable[T], page_size: int) -> Paginator[T]:
    """Return a :class:`Paginator` over ``items``."""
    return Paginator(items, page_size)