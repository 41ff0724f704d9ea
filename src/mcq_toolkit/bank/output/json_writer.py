"""
Module: bank.output.json_writer

Purpose:
    Export the shuffled bank as a JSON array for quiz front ends.

Output:
    [
      {
        "question": "2+2=?",
        "options": ["5", "4", "6", "3"],
        "correct_option": "B"
      },
      ...
    ]

Key Functions:
    - write_questions_json(): Validate and write atomically

Key Classes:
    - ExportError: The destination could not be written

Dependencies:
    - core.utils.serialization: Payload shape
    - core.schemas.validator: jsonschema validation

Used By:
    - bank.controller: Build pipeline
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Sequence

from mcq_toolkit.core.models import MCQ
from mcq_toolkit.core.schemas.validator import ValidationError, validate_question_bank
from mcq_toolkit.core.utils.serialization import serialize_questions

logger = logging.getLogger(__name__)


class ExportError(Exception):
    """Error writing the exported bank."""
    pass


def write_questions_json(
    questions: Sequence[MCQ],
    output_path: Path,
    *,
    validate: bool = True,
    indent: int = 2,
) -> Path:
    """
    Write questions to a JSON file.

    The payload is written to a temporary sibling first and then moved into
    place, so a failed write never leaves a half-written bank behind. An
    empty sequence writes "[]".

    Args:
        questions: Records in final order
        output_path: Destination .json path
        validate: Check the payload against the schema before writing
        indent: JSON indentation

    Returns:
        Path written

    Raises:
        ExportError: If validation fails or the path is not writable
    """
    payload = serialize_questions(questions)

    if validate:
        try:
            validate_question_bank(payload, strict=True)
        except ValidationError as e:
            raise ExportError(f"Refusing to write invalid bank ({e.path or 'root'}): {e}") from e

    tmp_path = output_path.with_suffix(output_path.suffix + ".tmp")
    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(tmp_path, "w", encoding="utf-8") as f:
            json.dump(payload, f, ensure_ascii=False, indent=indent)
            f.write("\n")
        tmp_path.replace(output_path)
    except OSError as e:
        tmp_path.unlink(missing_ok=True)
        raise ExportError(f"Failed to write {output_path}: {e}") from e

    logger.info(f"Wrote {len(payload)} questions to {output_path}")
    return output_path
