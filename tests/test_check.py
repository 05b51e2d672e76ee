import pytest

from pcoll import links
from pcoll.amortized import AmortizedQueue, amortized_queue
from pcoll.check import Severity, check_container
from pcoll.naive import naive_queue
from pcoll.stack import ListStack, list_stack


def test_fresh_containers_are_consistent() -> None:
    for container in (amortized_queue(1, 2), naive_queue(1, 2), list_stack(1, 2)):
        res = check_container(container)
        assert res.is_consistent
        assert not res.errors
        assert not res.warnings


def test_pending_reversal_is_a_warning() -> None:
    res = check_container(amortized_queue().enqueue(1).enqueue(2))
    assert res.is_consistent
    assert [d.check for d in res.warnings] == ["front_empty_rear_pending"]
    assert res.warnings[0].severity == Severity.WARNING
    assert res.container == "AmortizedQueue"


def test_size_mismatch_is_an_error() -> None:
    corrupt = AmortizedQueue(links.from_iterable([1, 2]), None, 5)
    res = check_container(corrupt)
    assert not res.is_consistent
    assert any(e.check == "size_matches_content" for e in res.errors)


def test_negative_size_is_an_error() -> None:
    corrupt = ListStack(None, -1)
    res = check_container(corrupt)
    checks = {e.check for e in res.errors}
    assert checks == {"size_nonnegative", "size_matches_content"}


def test_unknown_container_type() -> None:
    with pytest.raises(TypeError):
        check_container([1, 2, 3])  # type: ignore[arg-type]
