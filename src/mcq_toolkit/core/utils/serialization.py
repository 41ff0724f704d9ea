"""
Serialization Utilities

Converts MCQ records to and from the exported JSON shape:

    [{"question": str, "options": [str x4], "correct_option": "A"-"D"}, ...]

- `serialize_*` / `deserialize_*` functions wrap `MCQ.to_dict()` and
  `MCQ.from_dict()`
- Payloads are validated against the schema on the way in
- File writing lives in bank.output.json_writer (atomic, error-mapped);
  this module only reads
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Iterable

from ..models.questions import MCQ
from ..schemas.validator import validate_question_bank, validate_question, ValidationError


# ─────────────────────────────────────────────────────────────────────────────
# Question Serialization
# ─────────────────────────────────────────────────────────────────────────────

def serialize_question(question: MCQ) -> dict[str, Any]:
    """
    Serialize an MCQ to a dictionary.

    The output can be written to JSON and will pass schema validation.
    """
    return question.to_dict()


def deserialize_question(data: dict[str, Any], *, validate: bool = True) -> MCQ:
    """
    Deserialize an MCQ from a dictionary.

    Args:
        data: Dictionary from JSON
        validate: Whether to run basic validation first

    Returns:
        MCQ instance

    Raises:
        ValidationError: If validate=True and data is invalid
        ValueError: If data cannot be parsed
    """
    if validate:
        validate_question(data)
    return MCQ.from_dict(data)


def serialize_questions(questions: Iterable[MCQ]) -> list[dict[str, Any]]:
    """Serialize records in order to the exported list shape."""
    return [serialize_question(question) for question in questions]


# ─────────────────────────────────────────────────────────────────────────────
# File I/O
# ─────────────────────────────────────────────────────────────────────────────

def load_questions_json(path: Path, *, strict: bool = True) -> list[MCQ]:
    """
    Load an exported question bank back into MCQ records.

    Args:
        path: Path to questions.json
        strict: Run full jsonschema validation as well as basic checks

    Returns:
        Records in file order

    Raises:
        FileNotFoundError: If file doesn't exist
        ValidationError: If JSON is malformed or fails validation
    """
    if not path.exists():
        raise FileNotFoundError(f"Question bank not found: {path}")

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ValidationError(f"Invalid JSON in {path}: {e}")

    validate_question_bank(data, strict=strict)
    return [deserialize_question(item, validate=False) for item in data]
