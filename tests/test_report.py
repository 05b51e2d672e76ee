from pcoll import Nothing, Some, amortized_queue, check_container, naive_queue
from pcoll.report import format_check, format_trace, render_trace_markdown
from pcoll.script import Command, Divergence, Op, Step, run_script

OPS = (Op(Command.ENQUEUE, 42), Op(Command.ENQUEUE, 43), Op(Command.DEQUEUE))


def test_format_trace_text() -> None:
    text = format_trace(run_script(naive_queue(), OPS))
    lines = text.splitlines()
    assert len(lines) == 5
    assert "enqueue 42" in lines[2]
    assert lines[3].endswith("front -> (42, 43)")
    assert "Some(42)" in lines[4]
    assert lines[4].endswith("front -> (43)")


def test_render_trace_markdown() -> None:
    trace = run_script(amortized_queue(1), OPS)
    md = render_trace_markdown(trace, "amortized", (1,))
    assert md.startswith("# Trace: amortized queue")
    assert "Initial contents: `1`" in md
    assert "| 3 | `dequeue` | Some(1) | 2 | `front -> () (42, 43) <- rear` |" in md
    assert "3 ops, final size 2." in md


def test_render_trace_markdown_empty() -> None:
    md = render_trace_markdown((), "naive")
    assert "Initial contents" not in md
    assert "0 ops, final size 0." in md


def test_format_check() -> None:
    ok = format_check(check_container(naive_queue(1)))
    assert ok == "NaiveQueue: ✓ consistent"

    pending = format_check(check_container(amortized_queue().enqueue(1)))
    assert "[front_empty_rear_pending]" in pending
    assert "(WARNING)" in pending


def test_divergence_description() -> None:
    op = Op(Command.DEQUEUE)
    d = Divergence(
        index=2,
        op=op,
        naive=Step(op, Some(1), 0, True, ""),
        amortized=Step(op, Nothing(), 1, False, ""),
    )
    assert d.describe() == (
        "step 3 (dequeue): naive observed Some(1) (size 0), "
        "amortized observed None (size 1)"
    )


def test_markdown_escapes_pipes_in_cells() -> None:
    trace = run_script(naive_queue(), (Op(Command.ENQUEUE, "a|b"), Op(Command.PEEK_FRONT)))
    md = render_trace_markdown(trace, "naive")
    assert "| 1 | `enqueue a\\|b` |  | 1 | `front -> (a\\|b)` |" in md
    assert "| 2 | `peek_front` | Some(a\\|b) | 1 | `front -> (a\\|b)` |" in md
