from __future__ import annotations

from pathlib import Path
from typing import Any

import jinja2

from .check import CheckResult, Severity
from .script import Trace

_TEMPLATES = jinja2.Environment(
    loader=jinja2.FileSystemLoader(Path(__file__).parent / "templates"),
    keep_trailing_newline=True,
    trim_blocks=True,
    lstrip_blocks=True,
)


def _escape_cell(text: str) -> str:
    """Keep a value inside its Markdown table cell."""
    return text.replace("|", "\\|")


_TEMPLATES.filters["cell"] = _escape_cell


def _observed(value: Any) -> str:
    return "" if value is None else str(value)


def format_trace(trace: Trace) -> str:
    """Human-readable table for terminal output."""
    lines = []
    lines.append(f"  {'#':>3}  {'Op':<18} {'Observed':<14} {'Size':>4}  Queue")
    lines.append(f"  {'─' * 3}  {'─' * 18} {'─' * 14} {'─' * 4}  {'─' * 24}")
    for i, step in enumerate(trace, start=1):
        lines.append(
            f"  {i:>3}  {str(step.op):<18} {_observed(step.observed):<14} {step.size:>4}  {step.rendered}"
        )
    return "\n".join(lines)


def render_trace_markdown(trace: Trace, strategy: str, initial: tuple[Any, ...] = ()) -> str:
    return _TEMPLATES.get_template("trace.md.j2").render(
        strategy=strategy,
        initial=", ".join(str(v) for v in initial),
        steps=trace,
        final_size=trace[-1].size if trace else len(initial),
    )


def format_check(result: CheckResult) -> str:
    lines = []
    if result.is_consistent:
        lines.append(f"{result.container}: ✓ consistent")
    else:
        lines.append(f"{result.container}: × {len(result.errors)} invariant violation(s)")
    for diag in result.diagnostics:
        tag = "ERROR" if diag.severity == Severity.ERROR else "WARNING"
        lines.append(f"    - [{diag.check}] {diag.message} ({tag})")
    return "\n".join(lines)
