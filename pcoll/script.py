"""Operation scripts: a line-oriented way to drive a queue.

    # comment
    enqueue 42
    dequeue
    peek_front
    peek_back
    size
    is_empty

Blank lines and ``#`` comments are skipped. A comment starts at a ``#`` that
begins the line or follows whitespace, so ``enqueue C#`` keeps its ``#``.
Command and argument may be separated by any whitespace. ``-`` and ``_`` are
interchangeable in command names, so ``peek-front`` works too. The argument
to ``enqueue`` is read as an int, then a float, and otherwise kept as the raw
string.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, TypeAlias

from .base import Queue, Strategy, new_queue
from .outcome import Err, Nothing, Ok, Option, Result, Some

logger = logging.getLogger(__name__)

# A comment starts a line or follows whitespace, so values may contain "#"
_COMMENT = re.compile(r"(?:^|\s)#")


class Command(Enum):
    ENQUEUE = "enqueue"
    DEQUEUE = "dequeue"
    PEEK_FRONT = "peek_front"
    PEEK_BACK = "peek_back"
    SIZE = "size"
    IS_EMPTY = "is_empty"


@dataclass(frozen=True)
class Op:
    command: Command
    argument: Any = None

    def __str__(self) -> str:
        if self.command == Command.ENQUEUE:
            return f"{self.command.value} {self.argument}"
        return self.command.value


class ScriptError(ValueError):
    def __init__(self, line: int, message: str) -> None:
        super().__init__(f"line {line}: {message}")
        self.line = line


@dataclass(frozen=True)
class Step:
    op: Op
    observed: Any
    """``Option`` for dequeue and peeks, int for size, bool for is_empty, None for enqueue."""
    size: int
    is_empty: bool
    rendered: str


Trace: TypeAlias = tuple[Step, ...]


@dataclass(frozen=True)
class Divergence:
    """First step at which the two strategies disagree."""

    index: int
    op: Op
    naive: Step
    amortized: Step

    def describe(self) -> str:
        return (
            f"step {self.index + 1} ({self.op}): "
            f"naive observed {self.naive.observed} (size {self.naive.size}), "
            f"amortized observed {self.amortized.observed} (size {self.amortized.size})"
        )


def parse_value(text: str) -> int | float | str:
    for convert in (int, float):
        try:
            return convert(text)
        except ValueError:
            continue
    return text


def parse_script(text: str) -> Result[tuple[Op, ...], ScriptError]:
    """Parse script text into ops, or the first error with its line number."""
    ops: list[Op] = []
    for lineno, raw in enumerate(text.splitlines(), start=1):
        line = _COMMENT.split(raw, 1)[0].strip()
        if not line:
            continue
        name, *tail = line.split(None, 1)
        rest = tail[0].strip() if tail else ""
        try:
            command = Command(name.lower().replace("-", "_"))
        except ValueError:
            return Err(ScriptError(lineno, f"Unknown command '{name}'"))

        if command == Command.ENQUEUE:
            if not rest:
                return Err(ScriptError(lineno, "enqueue needs a value"))
            ops.append(Op(command, parse_value(rest)))
        elif rest:
            return Err(ScriptError(lineno, f"{command.value} takes no argument, got '{rest}'"))
        else:
            ops.append(Op(command))

    logger.debug("Parsed %d ops", len(ops))
    return Ok(tuple(ops))


def apply_op(queue: Queue[Any], op: Op) -> tuple[Any, Queue[Any]]:
    """Apply one op, returning ``(observation, next_queue)``."""
    match op.command:
        case Command.ENQUEUE:
            return None, queue.enqueue(op.argument)
        case Command.DEQUEUE:
            return queue.dequeue()
        case Command.PEEK_FRONT:
            return queue.peek_front(), queue
        case Command.PEEK_BACK:
            return queue.peek_back(), queue
        case Command.SIZE:
            return queue.size, queue
        case Command.IS_EMPTY:
            return queue.is_empty, queue


def run_script(queue: Queue[Any], ops: tuple[Op, ...]) -> Trace:
    steps: list[Step] = []
    for op in ops:
        observed, queue = apply_op(queue, op)
        steps.append(Step(op, observed, queue.size, queue.is_empty, str(queue)))
    return tuple(steps)


def final_queue(queue: Queue[Any], ops: tuple[Op, ...]) -> Queue[Any]:
    for op in ops:
        _, queue = apply_op(queue, op)
    return queue


def compare_strategies(ops: tuple[Op, ...], initial: tuple[Any, ...] = ()) -> Option[Divergence]:
    """Run ``ops`` against both strategies and report the first disagreement."""
    naive = run_script(new_queue(Strategy.NAIVE, initial), ops)
    amortized = run_script(new_queue(Strategy.AMORTIZED, initial), ops)
    for index, (n, a) in enumerate(zip(naive, amortized, strict=True)):
        if (n.observed, n.size, n.is_empty) != (a.observed, a.size, a.is_empty):
            logger.debug("Strategies diverge at step %d", index + 1)
            return Some(Divergence(index, n.op, n, a))
    return Nothing()
