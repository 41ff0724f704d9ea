"""
Core Models Package

Immutable question record and the option letter mapping.

All records are frozen dataclasses. Shuffling creates new instances, so a
record handed to the exporter is never observed half-updated.
"""

from .letters import (
    OPTION_COUNT,
    OPTION_LETTERS,
    index_to_letter,
    is_option_letter,
    letter_to_index,
)
from .questions import MCQ

__all__ = [
    "MCQ",
    "OPTION_COUNT",
    "OPTION_LETTERS",
    "index_to_letter",
    "is_option_letter",
    "letter_to_index",
]
