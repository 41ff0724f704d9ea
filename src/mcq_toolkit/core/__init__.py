"""
MCQ Toolkit Core Package

Shared data model and utilities used by every pipeline stage.

- `MCQ`: frozen question record (prompt, four options, correct slot)
- `letters`: the only letter <-> index mapping
- `schemas`: export shape validation (jsonschema)
- `utils`: trim() and JSON (de)serialization
"""

from .models import MCQ, OPTION_LETTERS, index_to_letter, letter_to_index

__all__ = [
    "MCQ",
    "OPTION_LETTERS",
    "index_to_letter",
    "letter_to_index",
]
