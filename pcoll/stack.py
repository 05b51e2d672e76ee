"""Persistent LIFO stack over linked cells."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Generic, TypeVar

from . import links
from .links import Link
from .outcome import Nothing, Option, Some

T = TypeVar("T")


@dataclass(frozen=True, eq=False, repr=False)
class ListStack(Generic[T]):
    """Immutable stack, top first. Build with :func:`list_stack`."""

    _elements: Link[T] = None
    _size: int = 0

    def push(self, element: T) -> ListStack[T]:
        return ListStack(links.prepend(element, self._elements), self._size + 1)

    def pop(self) -> tuple[Option[T], ListStack[T]]:
        if self._elements is None:
            return Nothing(), self
        return Some(self._elements.head), ListStack(self._elements.tail, self._size - 1)

    def peek(self) -> Option[T]:
        if self._elements is None:
            return Nothing()
        return Some(self._elements.head)

    @property
    def is_empty(self) -> bool:
        return self._elements is None

    @property
    def size(self) -> int:
        return self._size

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        return links.iterate(self._elements)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ListStack):
            return NotImplemented
        return self._size == other._size and tuple(self) == tuple(other)

    def __hash__(self) -> int:
        return hash((ListStack, tuple(self)))

    def __str__(self) -> str:
        return f"top -> ({', '.join(str(e) for e in self)})"

    def __repr__(self) -> str:
        return f"list_stack({', '.join(repr(e) for e in self)})"


def list_stack(*elements: T) -> ListStack[T]:
    """Stack holding ``elements``; the first argument ends up on top."""
    return ListStack(links.from_iterable(elements), len(elements))
