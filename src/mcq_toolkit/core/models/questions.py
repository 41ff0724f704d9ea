"""
Module: questions

Purpose:
    Provides the MCQ dataclass - the record passed from parser to shuffler
    to exporter. Immutable: shuffling builds a new record rather than
    editing options and answer one after the other.

Key Functions:
    - MCQ.correct_letter: Letter of the correct option ("A"-"D")
    - MCQ.correct_text: Text of the correct option
    - MCQ.to_dict() / MCQ.from_dict(): Export shape

Dependencies:
    - dataclasses (std)
    - .letters: Letter/index mapping

Used By:
    - bank.loading.parser
    - bank.shuffling
    - core.utils.serialization
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Tuple

from .letters import OPTION_COUNT, index_to_letter, letter_to_index


@dataclass(frozen=True)
class MCQ:
    """
    Single multiple-choice question (immutable).

    Attributes:
        prompt: Question stem, already trimmed
        options: Exactly four option texts, slot 0 = A ... slot 3 = D
        correct_index: Slot of the correct option (0-3)

    Invariants:
        - len(options) == 4
        - 0 <= correct_index < 4

    Example:
        >>> q = MCQ("2+2=?", ("3", "4", "5", "6"), correct_index=1)
        >>> q.correct_letter
        'B'
        >>> q.correct_text
        '4'
    """

    prompt: str
    options: Tuple[str, ...]
    correct_index: int

    def __post_init__(self) -> None:
        """Validate record on construction."""
        if len(self.options) != OPTION_COUNT:
            raise ValueError(
                f"MCQ needs exactly {OPTION_COUNT} options, got {len(self.options)}"
            )
        if not (0 <= self.correct_index < OPTION_COUNT):
            raise ValueError(f"correct_index must be 0-{OPTION_COUNT - 1}: {self.correct_index}")
        # Store options as a tuple
        if not isinstance(self.options, tuple):
            object.__setattr__(self, "options", tuple(self.options))

    @property
    def correct_letter(self) -> str:
        return index_to_letter(self.correct_index)

    @property
    def correct_text(self) -> str:
        return self.options[self.correct_index]

    def to_dict(self) -> Dict[str, Any]:
        """
        Serialize to the export shape.

        Returns:
            {"question": str, "options": [str x4], "correct_option": "A"-"D"}
        """
        return {
            "question": self.prompt,
            "options": list(self.options),
            "correct_option": self.correct_letter,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> MCQ:
        """
        Deserialize from the export shape.

        Raises:
            KeyError: If a field is missing
            ValueError: If options or correct_option are invalid
        """
        return cls(
            prompt=str(data["question"]),
            options=tuple(str(option) for option in data["options"]),
            correct_index=letter_to_index(str(data["correct_option"])),
        )

    def __repr__(self) -> str:
        return f"MCQ({self.prompt!r}, answer={self.correct_letter})"
