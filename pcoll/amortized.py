"""Two-stacks queue with amortized O(1) enqueue and dequeue.

The queue keeps two immutable linked lists:

- ``front``: elements ready to be dequeued, in dequeue order
- ``rear``: recently enqueued elements, newest first

The logical content, front to back, is always ``front ++ reverse(rear)``.
Enqueue only ever prepends onto ``rear``. When a dequeue finds ``front``
empty, ``rear`` is reversed once to become the new ``front``. Every element
is moved by at most one reversal between its enqueue and its dequeue, which
bounds the total work of any operation sequence by O(operations).

Peeks never persist a reversal. ``peek_front`` on an empty ``front`` walks
``rear`` to its last cell and leaves both lists as they were.

Reachable states, as (front empty?, rear empty?):

    (yes, yes)  logically empty
    (no,  *)    dequeue is served straight from front
    (yes, no)   next dequeue pays the reversal
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass
from itertools import chain
from typing import Generic, TypeVar

from . import links
from .links import Link
from .outcome import Nothing, Option, Some

T = TypeVar("T")

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False, repr=False)
class AmortizedQueue(Generic[T]):
    """Immutable FIFO queue over two linked lists. Build with :func:`amortized_queue`."""

    _front: Link[T] = None
    _rear: Link[T] = None
    _size: int = 0

    def enqueue(self, element: T) -> AmortizedQueue[T]:
        return AmortizedQueue(self._front, links.prepend(element, self._rear), self._size + 1)

    def dequeue(self) -> tuple[Option[T], AmortizedQueue[T]]:
        if self._front is not None:
            return Some(self._front.head), AmortizedQueue(
                self._front.tail, self._rear, self._size - 1
            )
        if self._rear is None:
            return Nothing(), self

        logger.debug("Reversing rear of %d elements into front", self._size)
        new_front = links.reverse(self._rear)
        assert new_front is not None
        return Some(new_front.head), AmortizedQueue(new_front.tail, None, self._size - 1)

    def peek_front(self) -> Option[T]:
        if self._front is not None:
            return Some(self._front.head)
        if self._rear is not None:
            return Some(links.last(self._rear))
        return Nothing()

    def peek_back(self) -> Option[T]:
        if self._rear is not None:
            return Some(self._rear.head)
        if self._front is not None:
            return Some(links.last(self._front))
        return Nothing()

    @property
    def is_empty(self) -> bool:
        return self._front is None and self._rear is None

    @property
    def size(self) -> int:
        return self._size

    def buffers(self) -> tuple[tuple[T, ...], tuple[T, ...]]:
        """Diagnostic view of ``(front, rear)`` in storage order (rear newest first)."""
        return links.to_tuple(self._front), links.to_tuple(self._rear)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        return chain(links.iterate(self._front), links.iterate(links.reverse(self._rear)))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AmortizedQueue):
            return NotImplemented
        # Same content may be split differently between the buffers.
        return self._size == other._size and tuple(self) == tuple(other)

    def __hash__(self) -> int:
        return hash((AmortizedQueue, tuple(self)))

    def __str__(self) -> str:
        front = ", ".join(str(e) for e in links.iterate(self._front))
        rear = ", ".join(str(e) for e in links.iterate(links.reverse(self._rear)))
        return f"front -> ({front}) ({rear}) <- rear"

    def __repr__(self) -> str:
        return f"amortized_queue({', '.join(repr(e) for e in self)})"


def amortized_queue(*elements: T) -> AmortizedQueue[T]:
    """Queue holding ``elements`` in its front buffer, the first of them at the front."""
    return AmortizedQueue(links.from_iterable(elements), None, len(elements))
