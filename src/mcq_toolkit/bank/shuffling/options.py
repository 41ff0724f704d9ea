"""
Module: bank.shuffling.options

Purpose:
    Shuffle the four options of every question while keeping the correct
    answer attached to its text.

Key Functions:
    - permutation(): Fisher-Yates permutation of range(size)
    - shuffle_question_options(): New record with options permuted
    - shuffle_options(): Apply to every record in a bank

Dependencies:
    - random (std)
    - core.models.MCQ

Used By:
    - bank.controller: Build pipeline
    - bank.shuffling.order: FISHER_YATES strategy
"""

from __future__ import annotations

import logging
import random
from dataclasses import replace
from typing import List, Sequence

from mcq_toolkit.core.models import MCQ

logger = logging.getLogger(__name__)


def permutation(size: int, rng: random.Random) -> List[int]:
    """
    Uniform random permutation of range(size).

    Fisher-Yates: walk j from the last slot down to 1 and swap slot j with
    a slot drawn uniformly from 0..j inclusive.

    Example:
        >>> sorted(permutation(4, random.Random(7)))
        [0, 1, 2, 3]
    """
    indices = list(range(size))
    for j in range(size - 1, 0, -1):
        k = rng.randint(0, j)
        indices[j], indices[k] = indices[k], indices[j]
    return indices


def shuffle_question_options(question: MCQ, rng: random.Random) -> MCQ:
    """
    Return a copy of question with its options permuted.

    New slot j holds the text previously at slot perm[j]; the correct
    index moves to the slot j' where perm[j'] is the old correct index,
    so correct_text is unchanged.

    Args:
        question: Record to shuffle
        rng: Seeded random source

    Returns:
        New MCQ (the original is untouched)
    """
    perm = permutation(len(question.options), rng)
    new_options = tuple(question.options[old] for old in perm)
    new_correct = perm.index(question.correct_index)
    return replace(question, options=new_options, correct_index=new_correct)


def shuffle_options(questions: Sequence[MCQ], rng: random.Random) -> List[MCQ]:
    """
    Shuffle options of every question independently.

    Returns:
        New list, same order as input
    """
    shuffled = [shuffle_question_options(question, rng) for question in questions]
    logger.debug(f"Shuffled options for {len(shuffled)} questions")
    return shuffled
