"""
Unit Tests for the MCQ model.
"""

import dataclasses

import pytest

from mcq_toolkit.core.models import MCQ


class TestMCQConstruction:
    """Tests for MCQ validation on construction."""

    def test_create_when_valid_then_exposes_answer(self, sample_question):
        assert sample_question.correct_letter == "B"
        assert sample_question.correct_text == "4"

    def test_create_when_options_list_then_stored_as_tuple(self):
        q = MCQ("p", ["a", "b", "c", "d"], correct_index=0)

        assert q.options == ("a", "b", "c", "d")
        hash(q)  # Must stay hashable

    def test_create_when_three_options_then_raises(self):
        with pytest.raises(ValueError, match="exactly 4 options"):
            MCQ("p", ("a", "b", "c"), correct_index=0)

    @pytest.mark.parametrize("index", [-1, 4])
    def test_create_when_correct_index_out_of_range_then_raises(self, index):
        with pytest.raises(ValueError, match="correct_index"):
            MCQ("p", ("a", "b", "c", "d"), correct_index=index)

    def test_create_when_empty_option_text_then_accepted(self):
        q = MCQ("p", ("", "b", "c", "d"), correct_index=0)

        assert q.correct_text == ""

    def test_mutate_when_frozen_then_raises(self, sample_question):
        with pytest.raises(dataclasses.FrozenInstanceError):
            sample_question.correct_index = 0


class TestMCQSerialization:
    """Tests for to_dict/from_dict."""

    def test_to_dict_when_question_given_then_export_shape(self, sample_question):
        assert sample_question.to_dict() == {
            "question": "2+2=?",
            "options": ["3", "4", "5", "6"],
            "correct_option": "B",
        }

    def test_from_dict_when_lowercase_answer_then_accepted(self):
        q = MCQ.from_dict({
            "question": "p",
            "options": ["a", "b", "c", "d"],
            "correct_option": "d",
        })

        assert q.correct_index == 3

    def test_from_dict_when_missing_field_then_raises(self):
        with pytest.raises(KeyError):
            MCQ.from_dict({"question": "p", "options": ["a", "b", "c", "d"]})
