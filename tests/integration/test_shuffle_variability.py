"""
Tests for seed-based variability of the shuffled bank.

Verifies:
1. Same seed produces identical banks (determinism)
2. Different seeds produce variety in answer positions and question order
3. Across many runs every answer slot gets used (no memorizable positions)
"""

from collections import Counter

import pytest

from mcq_toolkit.bank.loading.parser import parse_questions
from mcq_toolkit.bank.shuffling import make_rng, shuffle_options, shuffle_order


def run_pipeline(lines, seed):
    """Parse then shuffle with one seeded rng, as the controller does."""
    rng, _ = make_rng(seed)
    questions = parse_questions(lines).questions
    return shuffle_order(shuffle_options(questions, rng), rng)


@pytest.fixture
def bank_lines() -> list[str]:
    lines = []
    for i in range(8):
        lines += [
            f"QUESTION: question {i}",
            f"A: q{i} alpha",
            f"B: q{i} bravo",
            f"C: q{i} charlie",
            f"D: q{i} delta",
            "ANSWER: A",
        ]
    return lines


class TestSeedDeterminism:
    """Same seed, same bank."""

    def test_same_seed_produces_identical_results(self, bank_lines):
        assert run_pipeline(bank_lines, 12345) == run_pipeline(bank_lines, 12345)


class TestSeedVariability:
    """Different seeds, different banks."""

    def test_different_seeds_produce_different_orders(self, bank_lines):
        orders = {
            tuple(q.prompt for q in run_pipeline(bank_lines, seed))
            for seed in range(50)
        }

        assert len(orders) >= 45, f"Only {len(orders)} unique orders from 50 seeds"

    def test_answer_slots_spread_across_runs(self, bank_lines):
        # Every source answer is A; after shuffling, all slots should appear
        slots = Counter(
            q.correct_letter
            for seed in range(100)
            for q in run_pipeline(bank_lines, seed)
        )

        assert set(slots) == {"A", "B", "C", "D"}
        assert min(slots.values()) > 100

    def test_correct_text_survives_every_run(self, bank_lines):
        for seed in range(100):
            for q in run_pipeline(bank_lines, seed):
                assert q.correct_text.endswith("alpha")


def test_adjacent_seeds_produce_different_banks(bank_lines):
    """Seeds one apart, as consecutive clock readings would be, still diverge."""
    assert run_pipeline(bank_lines, 1_000_000) != run_pipeline(bank_lines, 1_000_001)
