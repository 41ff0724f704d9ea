"""
Tests for option shuffling.

Verifies across many seeds:
1. The correct answer text is still marked correct
2. The option multiset is unchanged
3. Every permutation of four options can occur
"""

import random
from collections import Counter

import pytest

from mcq_toolkit.core.models import MCQ
from mcq_toolkit.bank.shuffling.options import (
    permutation,
    shuffle_options,
    shuffle_question_options,
)


class TestPermutation:
    """Tests for the Fisher-Yates index permutation."""

    @pytest.mark.parametrize("size", [0, 1, 2, 4, 9])
    def test_permutation_when_any_size_then_contains_each_index_once(self, size):
        rng = random.Random(size)

        assert sorted(permutation(size, rng)) == list(range(size))

    def test_permutation_when_many_draws_then_all_24_orderings_seen(self):
        rng = random.Random(2024)

        seen = {tuple(permutation(4, rng)) for _ in range(2000)}

        assert len(seen) == 24

    def test_permutation_when_many_draws_then_roughly_uniform(self):
        rng = random.Random(99)
        draws = 24_000

        counts = Counter(tuple(permutation(4, rng)) for _ in range(draws))

        # Expected 1000 each; allow a wide band
        assert all(700 < count < 1300 for count in counts.values())

    def test_permutation_when_same_seed_then_same_result(self):
        assert permutation(4, random.Random(5)) == permutation(4, random.Random(5))


class TestShuffleQuestionOptions:
    """Tests for a single question."""

    @pytest.mark.parametrize("seed", range(200))
    def test_shuffle_when_any_seed_then_correct_text_preserved(self, sample_question, seed):
        shuffled = shuffle_question_options(sample_question, random.Random(seed))

        assert shuffled.correct_text == "4"
        assert shuffled.options[shuffled.correct_index] == sample_question.correct_text

    @pytest.mark.parametrize("seed", range(50))
    def test_shuffle_when_any_seed_then_option_multiset_preserved(self, seed):
        q = MCQ("dup", ("x", "x", "y", "z"), correct_index=2)

        shuffled = shuffle_question_options(q, random.Random(seed))

        assert Counter(shuffled.options) == Counter(q.options)
        assert shuffled.correct_text == "y"

    def test_shuffle_when_called_then_original_untouched(self, sample_question):
        shuffle_question_options(sample_question, random.Random(1))

        assert sample_question.options == ("3", "4", "5", "6")
        assert sample_question.correct_index == 1

    def test_shuffle_when_many_seeds_then_answer_lands_in_every_slot(self, sample_question):
        slots = {
            shuffle_question_options(sample_question, random.Random(seed)).correct_index
            for seed in range(200)
        }

        assert slots == {0, 1, 2, 3}

    def test_shuffle_when_prompt_given_then_prompt_unchanged(self, sample_question):
        shuffled = shuffle_question_options(sample_question, random.Random(3))

        assert shuffled.prompt == sample_question.prompt


class TestShuffleOptions:
    """Tests for the whole bank."""

    def test_shuffle_when_bank_given_then_order_and_answers_kept(self, sample_questions):
        shuffled = shuffle_options(sample_questions, random.Random(11))

        assert len(shuffled) == len(sample_questions)
        for before, after in zip(sample_questions, shuffled):
            assert after.prompt == before.prompt
            assert after.correct_text == before.correct_text
            assert sorted(after.options) == sorted(before.options)

    def test_shuffle_when_empty_then_empty(self):
        assert shuffle_options([], random.Random(0)) == []

    def test_shuffle_when_input_list_then_not_mutated(self, sample_questions):
        snapshot = list(sample_questions)

        shuffle_options(sample_questions, random.Random(4))

        assert sample_questions == snapshot
