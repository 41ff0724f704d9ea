"""
Module: bank.shuffling

Purpose:
    Randomize a parsed question bank: option order within each question
    (tracking the correct answer) and question order across the bank.

Key Functions:
    - make_rng(): Seeded random source for one run
    - shuffle_options(): Per-question option shuffle
    - shuffle_order(): Bank-level question order shuffle

Used By:
    - bank.controller: Build pipeline
"""

from .rng import make_rng, fresh_seed
from .options import permutation, shuffle_options, shuffle_question_options
from .order import OrderStrategy, shuffle_order

__all__ = [
    "make_rng",
    "fresh_seed",
    "permutation",
    "shuffle_options",
    "shuffle_question_options",
    "OrderStrategy",
    "shuffle_order",
]
