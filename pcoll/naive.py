"""Single-sequence queue.

Elements live in one tuple, front to back. Enqueue copies the tuple to add
at the end, so it costs O(n). This is the reference the amortized queue is
validated against, not something to use where enqueue cost matters.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Generic, TypeVar

from .outcome import Nothing, Option, Some

T = TypeVar("T")


@dataclass(frozen=True, eq=False, repr=False)
class NaiveQueue(Generic[T]):
    """Immutable FIFO queue over a tuple. Build with :func:`naive_queue`."""

    _elements: tuple[T, ...] = ()

    def enqueue(self, element: T) -> NaiveQueue[T]:
        return NaiveQueue(self._elements + (element,))

    def dequeue(self) -> tuple[Option[T], NaiveQueue[T]]:
        if not self._elements:
            return Nothing(), self
        return Some(self._elements[0]), NaiveQueue(self._elements[1:])

    def peek_front(self) -> Option[T]:
        if not self._elements:
            return Nothing()
        return Some(self._elements[0])

    def peek_back(self) -> Option[T]:
        if not self._elements:
            return Nothing()
        return Some(self._elements[-1])

    @property
    def is_empty(self) -> bool:
        return not self._elements

    @property
    def size(self) -> int:
        return len(self._elements)

    def __len__(self) -> int:
        return self.size

    def __iter__(self) -> Iterator[T]:
        return iter(self._elements)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NaiveQueue):
            return NotImplemented
        return self._elements == other._elements

    def __hash__(self) -> int:
        return hash((NaiveQueue, self._elements))

    def __str__(self) -> str:
        return f"front -> ({', '.join(str(e) for e in self._elements)})"

    def __repr__(self) -> str:
        return f"naive_queue({', '.join(repr(e) for e in self._elements)})"


def naive_queue(*elements: T) -> NaiveQueue[T]:
    """Queue holding ``elements``, the first of them at the front."""
    return NaiveQueue(tuple(elements))
