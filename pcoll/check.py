from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from . import links
from .amortized import AmortizedQueue
from .naive import NaiveQueue
from .stack import ListStack


class Severity(Enum):
    ERROR = "error"
    WARNING = "warning"


@dataclass(frozen=True)
class Diagnostic:
    check: str
    severity: Severity
    message: str


@dataclass(frozen=True)
class CheckResult:
    container: str
    diagnostics: tuple[Diagnostic, ...]

    @property
    def errors(self) -> tuple[Diagnostic, ...]:
        return tuple(d for d in self.diagnostics if d.severity == Severity.ERROR)

    @property
    def warnings(self) -> tuple[Diagnostic, ...]:
        return tuple(d for d in self.diagnostics if d.severity == Severity.WARNING)

    @property
    def is_consistent(self) -> bool:
        return len(self.errors) == 0


@dataclass
class CheckContext:
    diagnostics: list[Diagnostic] = field(default_factory=list)

    def error(self, check: str, message: str) -> None:
        self.diagnostics.append(Diagnostic(check, Severity.ERROR, message))

    def warning(self, check: str, message: str) -> None:
        self.diagnostics.append(Diagnostic(check, Severity.WARNING, message))


def _check_size(ctx: CheckContext, cached: int, counted: int) -> None:
    if cached < 0:
        ctx.error("size_nonnegative", f"Cached size is negative: {cached}")
    if cached != counted:
        ctx.error(
            "size_matches_content",
            f"Cached size {cached} but {counted} elements are stored",
        )


def check_amortized(queue: AmortizedQueue[object], ctx: CheckContext) -> None:
    front = queue._front
    rear = queue._rear
    _check_size(ctx, queue._size, links.length(front) + links.length(rear))
    if front is None and rear is not None:
        ctx.warning(
            "front_empty_rear_pending",
            f"Front is empty; next dequeue reverses {links.length(rear)} rear elements",
        )


def check_naive(queue: NaiveQueue[object], ctx: CheckContext) -> None:
    _check_size(ctx, queue.size, len(queue._elements))


def check_stack(stack: ListStack[object], ctx: CheckContext) -> None:
    _check_size(ctx, stack._size, links.length(stack._elements))


def check_container(
    container: AmortizedQueue[object] | NaiveQueue[object] | ListStack[object],
) -> CheckResult:
    """Verify the structural invariants of a queue or stack value."""
    ctx = CheckContext()
    match container:
        case AmortizedQueue():
            check_amortized(container, ctx)
        case NaiveQueue():
            check_naive(container, ctx)
        case ListStack():
            check_stack(container, ctx)
        case _:
            raise TypeError(f"Cannot check {type(container).__name__}")
    return CheckResult(type(container).__name__, tuple(ctx.diagnostics))
