"""
Schema Validation Utilities

Validates exported question-bank payloads before they are written or after
they are read back.

Two levels:
- Basic checks (always): structure, field presence, option count and
  answer letter, with a precise path for the first problem found.
- Strict checks (strict=True): full JSON Schema validation with
  jsonschema against question_bank.schema.json.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import jsonschema

from ..models.letters import OPTION_COUNT, OPTION_LETTERS


QUESTION_BANK_SCHEMA = "question_bank"

# Load schemas lazily
_SCHEMAS: dict[str, dict] = {}


def _load_schema(name: str) -> dict:
    """Load a schema from the schemas directory."""
    if name not in _SCHEMAS:
        schema_path = Path(__file__).parent / f"{name}.schema.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")
        with open(schema_path, "r", encoding="utf-8") as f:
            _SCHEMAS[name] = json.load(f)
    return _SCHEMAS[name]


class ValidationError(Exception):
    """Raised when data fails schema validation."""

    def __init__(self, message: str, path: str = "", errors: list[str] | None = None):
        super().__init__(message)
        self.path = path
        self.errors = errors or []


def validate_question_bank(data: Any, *, strict: bool = True) -> None:
    """
    Validate an exported question bank (list of question dicts).

    Args:
        data: Decoded JSON payload
        strict: If True, also run full jsonschema validation

    Raises:
        ValidationError: If data is invalid
    """
    if not isinstance(data, list):
        raise ValidationError(
            f"Question bank must be a list, got {type(data).__name__}",
            path="",
        )

    for i, item in enumerate(data):
        validate_question(item, path=f"[{i}]")

    if strict:
        schema = _load_schema(QUESTION_BANK_SCHEMA)
        try:
            jsonschema.validate(data, schema)
        except jsonschema.ValidationError as e:
            raise ValidationError(
                f"Schema validation failed: {e.message}",
                path=".".join(str(p) for p in e.absolute_path),
                errors=[e.message],
            )


def validate_question(data: Any, *, path: str = "") -> None:
    """
    Basic checks for a single exported question.

    Raises:
        ValidationError: If data is invalid
    """
    if not isinstance(data, dict):
        raise ValidationError("Question must be an object", path=path)

    required = ["question", "options", "correct_option"]
    missing = [f for f in required if f not in data]
    if missing:
        raise ValidationError(
            f"Missing required fields: {missing}",
            path=path,
            errors=[f"Missing field: {f}" for f in missing],
        )

    if not isinstance(data["question"], str):
        raise ValidationError("question must be a string", path=f"{path}.question")

    options = data["options"]
    if not isinstance(options, list) or len(options) != OPTION_COUNT:
        raise ValidationError(
            f"options must be a list of {OPTION_COUNT} strings",
            path=f"{path}.options",
        )
    for j, option in enumerate(options):
        if not isinstance(option, str):
            raise ValidationError(
                f"Option {j} must be a string: {option!r}",
                path=f"{path}.options[{j}]",
            )

    answer = data["correct_option"]
    if not (isinstance(answer, str) and len(answer) == 1 and answer in OPTION_LETTERS):
        raise ValidationError(
            f"Invalid correct_option: {answer!r} (must be one of {OPTION_LETTERS})",
            path=f"{path}.correct_option",
        )
