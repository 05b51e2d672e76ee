"""Tagged outcome types: Option for absence, Result for failure.

Container reads that may find nothing return an ``Option``:

- ``Some(value)``: a value is present
- ``Nothing()``: no value (e.g. dequeue on an empty queue)

Outer layers that can actually fail (script parsing, configuration) return a
``Result``: ``Ok(value)`` or ``Err(error)``. Neither type is ever replaced by
``None`` or by raising; callers ``match`` on the two cases.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeAlias, TypeVar

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E", bound=Exception)


# ---------------------------------------------------------------------------
# Option
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Some(Generic[T]):
    """A present value."""

    value: T

    def __str__(self) -> str:
        return f"Some({self.value})"


@dataclass(frozen=True)
class Nothing:
    """An absent value. All instances compare equal."""

    def __str__(self) -> str:
        return "None"


Option: TypeAlias = Some[T] | Nothing


def get_or_else(opt: Option[T], default: T) -> T:
    match opt:
        case Some(value):
            return value
        case _:
            return default


def map_option(opt: Option[T], fn: Callable[[T], U]) -> Option[U]:
    """Apply ``fn`` to a present value; absence passes through untouched."""
    match opt:
        case Some(value):
            return Some(fn(value))
        case _:
            return Nothing()


def from_optional(value: T | None) -> Option[T]:
    """Bridge from ``None``-returning code. ``None`` itself becomes ``Nothing()``."""
    return Nothing() if value is None else Some(value)


# ---------------------------------------------------------------------------
# Result
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T


@dataclass(frozen=True)
class Err(Generic[E]):
    error: E


Result: TypeAlias = Ok[T] | Err[E]
