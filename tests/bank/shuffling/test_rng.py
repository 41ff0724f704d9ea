"""
Tests for per-run random source creation.
"""

from unittest.mock import patch

from mcq_toolkit.bank.shuffling import rng as rng_module
from mcq_toolkit.bank.shuffling.rng import make_rng


def test_make_rng_when_seed_given_then_used():
    rng, seed = make_rng(42)

    assert seed == 42
    assert rng.random() == make_rng(42)[0].random()


def test_make_rng_when_no_seed_then_time_based():
    with patch.object(rng_module.time, "time_ns", return_value=(2**32) * 3 + 17):
        _, seed = make_rng()

    assert seed == 17


def test_make_rng_when_called_at_different_times_then_seeds_differ():
    with patch.object(rng_module.time, "time_ns", side_effect=[1_000, 2_000]):
        _, first = make_rng()
        _, second = make_rng()

    assert first != second
