"""Queue laws checked against both strategies on seeded random op sequences."""

import random

import pytest

from pcoll import Nothing, Some, Strategy, amortized_queue, naive_queue, new_queue

STRATEGIES = [Strategy.NAIVE, Strategy.AMORTIZED]


@pytest.mark.parametrize("strategy", STRATEGIES)
@pytest.mark.parametrize("n", [0, 1, 2, 7, 100])
def test_fifo_law(strategy: Strategy, n: int) -> None:
    q = new_queue(strategy)
    for i in range(n):
        q = q.enqueue(i)
    out = []
    for _ in range(n):
        value, q = q.dequeue()
        match value:
            case Some(v):
                out.append(v)
            case Nothing():
                pytest.fail("queue ran dry early")
    assert out == list(range(n))
    assert q.is_empty


@pytest.mark.parametrize("seed", range(20))
def test_strategies_agree_step_by_step(seed: int) -> None:
    rng = random.Random(seed)
    naive = naive_queue()
    amortized = amortized_queue()
    for step in range(200):
        if rng.random() < 0.55:
            naive = naive.enqueue(step)
            amortized = amortized.enqueue(step)
        else:
            n_val, naive = naive.dequeue()
            a_val, amortized = amortized.dequeue()
            assert n_val == a_val
        assert naive.size == amortized.size
        assert naive.is_empty == amortized.is_empty
        assert naive.peek_front() == amortized.peek_front()
        assert naive.peek_back() == amortized.peek_back()
        assert list(naive) == list(amortized)


@pytest.mark.parametrize("strategy", STRATEGIES)
def test_enqueue_and_dequeue_do_not_change_receiver(strategy: Strategy) -> None:
    q = new_queue(strategy, [1, 2, 3])
    q.enqueue(4)
    q.dequeue()

    assert q.size == 3
    drained = []
    while not q.is_empty:
        value, q = q.dequeue()
        drained.append(value)
    assert drained == [Some(1), Some(2), Some(3)]


@pytest.mark.parametrize("strategy", STRATEGIES)
def test_peek_is_idempotent(strategy: Strategy) -> None:
    q = new_queue(strategy, ["x"]).enqueue("y").enqueue("z")
    fronts = {q.peek_front() for _ in range(5)}
    backs = {q.peek_back() for _ in range(5)}
    assert fronts == {Some("x")}
    assert backs == {Some("z")}
    assert q.size == 3


@pytest.mark.parametrize("strategy", STRATEGIES)
def test_empty_dequeue(strategy: Strategy) -> None:
    value, q = new_queue(strategy).dequeue()
    assert value == Nothing()
    assert q.is_empty
    assert q.size == 0
