"""Immutable singly linked cells.

A linked list is either ``None`` (empty) or a ``Cons`` cell holding a head
value and the rest of the list. Cells are frozen, so any number of lists may
share a tail safely. Prepending is O(1); everything else walks the cells.

All traversals here are loops, never recursion, so long lists do not hit the
interpreter's recursion limit.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Generic, TypeAlias, TypeVar

T = TypeVar("T")


@dataclass(frozen=True, eq=False, repr=False)
class Cons(Generic[T]):
    head: T
    tail: Cons[T] | None


# Empty list is None
Link: TypeAlias = Cons[T] | None


def prepend(value: T, link: Link[T]) -> Cons[T]:
    return Cons(value, link)


def iterate(link: Link[T]) -> Iterator[T]:
    """Yield values head first."""
    node = link
    while node is not None:
        yield node.head
        node = node.tail


def from_iterable(values: Iterable[T]) -> Link[T]:
    """Build a list whose head is the first value of ``values``."""
    items = list(values)
    link: Link[T] = None
    for value in reversed(items):
        link = Cons(value, link)
    return link


def reverse(link: Link[T]) -> Link[T]:
    out: Link[T] = None
    for value in iterate(link):
        out = Cons(value, out)
    return out


def length(link: Link[T]) -> int:
    n = 0
    for _ in iterate(link):
        n += 1
    return n


def last(link: Cons[T]) -> T:
    """Value of the final cell. Callers guarantee the list is non-empty."""
    node = link
    while node.tail is not None:
        node = node.tail
    return node.head


def to_tuple(link: Link[T]) -> tuple[T, ...]:
    return tuple(iterate(link))
