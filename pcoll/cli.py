import argparse
import logging
import sys
from pathlib import Path

from pcoll.amortized import amortized_queue
from pcoll.base import Strategy, new_queue
from pcoll.check import check_container
from pcoll.config import load_settings
from pcoll.naive import naive_queue
from pcoll.outcome import Err, Nothing, Ok, Some, get_or_else
from pcoll.report import format_check, format_trace, render_trace_markdown
from pcoll.script import Op, ScriptError, compare_strategies, final_queue, parse_script, parse_value, run_script
from pcoll.stack import list_stack

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Demonstrations
# ---------------------------------------------------------------------------


def demo_naive() -> None:
    queue = naive_queue()
    print(queue)  # front -> ()
    deq_elem, rest = queue.dequeue()
    print(deq_elem)  # None
    print(rest)  # front -> ()
    queue2 = rest.enqueue(42).enqueue(43)
    print(queue2)  # front -> (42, 43)

    deq_elem2, rest2 = queue2.dequeue()
    print(deq_elem2)  # Some(42)
    print(rest2)  # front -> (43)


def demo_amortized() -> None:
    queue = amortized_queue(1, 2, 3)
    print(queue)  # front -> (1, 2, 3) () <- rear
    deq_elem, rest = queue.dequeue()
    print(deq_elem)  # Some(1)
    print(rest)  # front -> (2, 3) () <- rear
    queue2 = rest.enqueue(42).enqueue(43)
    print(queue2)  # front -> (2, 3) (42, 43) <- rear


def demo_stack() -> None:
    stack = list_stack()
    print(f"Initial stack: {stack}")

    stack1 = stack.push(1)
    print(f"After pushing 1: {stack1}")

    stack2 = stack1.push(2)
    print(f"After pushing 2: {stack2}")

    top, stack3 = stack2.pop()
    print(f"Popped element: {get_or_else(top, 'None')}, New stack: {stack3}")

    print(f"Peeked element: {get_or_else(stack3.peek(), 'None')}")
    print(f"Is the stack empty? {stack3.is_empty}")

    top1, stack4 = stack3.pop()
    print(f"Popped element: {get_or_else(top1, 'None')}, New stack: {stack4}")

    top2, stack5 = stack4.pop()
    print(f"Popped element: {get_or_else(top2, 'None')}, New stack: {stack5}")
    print(f"Is the stack empty after popping all elements? {stack5.is_empty}")

    print(f"Stack created with elements: {list_stack(1, 2, 3)}")


DEMOS = {
    "naive": demo_naive,
    "amortized": demo_amortized,
    "stack": demo_stack,
}


# ---------------------------------------------------------------------------
# Scripts
# ---------------------------------------------------------------------------


def _read_ops(source: str) -> tuple[Op, ...] | None:
    """Read and parse a script file (``-`` for stdin). Prints errors to stderr."""
    if source == "-":
        text = sys.stdin.read()
    else:
        try:
            text = Path(source).read_text()
        except OSError as e:
            print(f"Could not read script: {e}", file=sys.stderr)
            return None

    match parse_script(text):
        case Ok(ops):
            return ops
        case Err(ScriptError() as e):
            print(f"{source}: {e}", file=sys.stderr)
            return None


def _parse_init(raw: str | None) -> tuple[object, ...]:
    if not raw:
        return ()
    return tuple(parse_value(part.strip()) for part in raw.split(",") if part.strip())


def handle_run(source: str, *, strategy: Strategy, init: str | None, fmt: str, check: bool) -> int:
    ops = _read_ops(source)
    if ops is None:
        return 1

    initial = _parse_init(init)
    queue = new_queue(strategy, initial)
    trace = run_script(queue, ops)

    if fmt == "markdown":
        print(render_trace_markdown(trace, strategy.value, initial), end="")
    else:
        print(format_trace(trace))

    if check:
        result = check_container(final_queue(queue, ops))
        print(format_check(result))
        if not result.is_consistent:
            return 1
    return 0


def handle_compare(source: str, *, init: str | None) -> int:
    ops = _read_ops(source)
    if ops is None:
        return 1

    match compare_strategies(ops, _parse_init(init)):
        case Some(divergence):
            print(f"Strategies diverge at {divergence.describe()}")
            return 1
        case Nothing():
            print(f"Strategies agree on all {len(ops)} ops.")
            return 0


def main(argv: list[str] | None = None) -> int:
    settings_res = load_settings()
    match settings_res:
        case Ok(settings):
            pass
        case Err(e):
            print(f"Invalid configuration: {e}", file=sys.stderr)
            return 1

    parser = argparse.ArgumentParser(
        prog="pcoll",
        description="Persistent queues and stacks: demonstrations and operation scripts",
    )
    parser.add_argument(
        "--log-level",
        default=settings.log_level,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level (default from PCOLL_LOG_LEVEL, else WARNING).",
    )
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Command: demo
    demo_parser = subparsers.add_parser("demo", help="Print a container demonstration.")
    demo_parser.add_argument("which", choices=sorted(DEMOS))

    # Command: run
    run_parser = subparsers.add_parser(
        "run", help="Run an operation script against one queue strategy and print its trace."
    )
    run_parser.add_argument("script", metavar="SCRIPT", help="Script file, or '-' for stdin.")
    run_parser.add_argument(
        "--strategy",
        choices=[s.value for s in Strategy],
        default=settings.strategy.value,
        help="Queue strategy (default from PCOLL_STRATEGY, else amortized).",
    )
    run_parser.add_argument(
        "--init",
        metavar="VALUES",
        help="Comma-separated initial contents, front first.",
    )
    run_parser.add_argument(
        "--format",
        choices=["text", "markdown"],
        default="text",
        help="Trace output format.",
    )
    run_parser.add_argument(
        "--check",
        action="store_true",
        default=False,
        help="Verify the final queue's invariants after the trace.",
    )

    # Command: compare
    compare_parser = subparsers.add_parser(
        "compare", help="Run a script against both strategies and report any disagreement."
    )
    compare_parser.add_argument("script", metavar="SCRIPT", help="Script file, or '-' for stdin.")
    compare_parser.add_argument("--init", metavar="VALUES", help="Comma-separated initial contents.")

    args = parser.parse_args(argv)
    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.debug("Command %r, settings %r", args.command, settings)

    match args.command:
        case "demo":
            DEMOS[args.which]()
            return 0
        case "run":
            return handle_run(
                args.script,
                strategy=Strategy(args.strategy),
                init=args.init,
                fmt=args.format,
                check=args.check,
            )
        case "compare":
            return handle_compare(args.script, init=args.init)
        case None:
            parser.print_help()
            return 1
        case _:
            print(f"Unknown command: {args.command}", file=sys.stderr)
            parser.print_help()
            return 1


if __name__ == "__main__":
    sys.exit(main())
