"""pcoll: persistent (immutable) queues and stacks."""

from .outcome import (
    Err, Nothing, Ok, Option, Result, Some, from_optional, get_or_else, map_option
)
from .naive import NaiveQueue, naive_queue
from .amortized import AmortizedQueue, amortized_queue
from .stack import ListStack, list_stack
from .base import Queue, Stack, Strategy, new_queue
from .check import CheckResult, Diagnostic, Severity, check_container

__all__ = [
    # Outcomes
    "Some", "Nothing", "Option", "get_or_else", "map_option", "from_optional",
    "Ok", "Err", "Result",
    # Queues
    "NaiveQueue", "naive_queue", "AmortizedQueue", "amortized_queue",
    "Queue", "Strategy", "new_queue",
    # Stack
    "ListStack", "list_stack", "Stack",
    # Checks
    "CheckResult", "Diagnostic", "Severity", "check_container",
]
