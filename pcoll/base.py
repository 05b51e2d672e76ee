"""Container contracts and strategy selection.

``Queue`` and ``Stack`` are structural protocols: any class with the right
methods satisfies them, no inheritance involved. ``NaiveQueue`` and
``AmortizedQueue`` are the two queue strategies; callers pick one by
``Strategy`` tag or by calling its factory directly.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from enum import Enum
from typing import Protocol, Self, TypeVar

from .amortized import amortized_queue
from .naive import naive_queue
from .outcome import Option

T = TypeVar("T")


class Queue(Protocol[T]):
    def enqueue(self, element: T) -> Self: ...

    def dequeue(self) -> tuple[Option[T], Self]: ...

    def peek_front(self) -> Option[T]: ...

    def peek_back(self) -> Option[T]: ...

    @property
    def is_empty(self) -> bool: ...

    @property
    def size(self) -> int: ...

    def __len__(self) -> int: ...

    def __iter__(self) -> Iterator[T]: ...


class Stack(Protocol[T]):
    def push(self, element: T) -> Self: ...

    def pop(self) -> tuple[Option[T], Self]: ...

    def peek(self) -> Option[T]: ...

    @property
    def is_empty(self) -> bool: ...

    @property
    def size(self) -> int: ...


class Strategy(Enum):
    NAIVE = "naive"
    AMORTIZED = "amortized"


def new_queue(strategy: Strategy, elements: Iterable[T] = ()) -> Queue[T]:
    """Build an empty or pre-filled queue of the given strategy."""
    match strategy:
        case Strategy.NAIVE:
            return naive_queue(*elements)
        case Strategy.AMORTIZED:
            return amortized_queue(*elements)
