"""
Module: letters

Purpose:
    The one place that maps option letters (A-D) to option slot indices
    (0-3) and back. Parser, model and serializer all go through here so the
    letter arithmetic never leaks into call sites.

Key Functions:
    - letter_to_index(): "b" -> 1
    - index_to_letter(): 1 -> "B"
    - is_option_letter(): Membership test without raising

Used By:
    - core.models.questions.MCQ
    - bank.loading.parser
"""

from __future__ import annotations

OPTION_LETTERS = "ABCD"
OPTION_COUNT = len(OPTION_LETTERS)


def is_option_letter(text: str) -> bool:
    """Return True if text is a single option letter (case-insensitive)."""
    return len(text) == 1 and text.upper() in OPTION_LETTERS


def letter_to_index(letter: str) -> int:
    """
    Convert an option letter to its slot index.

    Args:
        letter: Single character, upper or lower case

    Returns:
        Index in range 0-3

    Raises:
        ValueError: If letter is not one of A-D

    Example:
        >>> letter_to_index("c")
        2
    """
    if not is_option_letter(letter):
        raise ValueError(f"Option letter must be one of {OPTION_LETTERS}: {letter!r}")
    return OPTION_LETTERS.index(letter.upper())


def index_to_letter(index: int) -> str:
    """
    Convert a slot index to its option letter.

    Raises:
        ValueError: If index is outside 0-3
    """
    if not (0 <= index < OPTION_COUNT):
        raise ValueError(f"Option index must be 0-{OPTION_COUNT - 1}: {index}")
    return OPTION_LETTERS[index]
