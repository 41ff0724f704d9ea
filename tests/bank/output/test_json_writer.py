"""
Unit tests for json_writer.py.
"""

import json
import pytest
from pathlib import Path
from unittest.mock import patch

from mcq_toolkit.bank.output.json_writer import ExportError, write_questions_json


class TestWriteQuestionsJson:
    """Tests for write_questions_json."""

    def test_write_when_questions_given_then_file_matches_shape(self, tmp_path: Path, sample_question):
        out = tmp_path / "questions.json"

        written = write_questions_json([sample_question], out)

        assert written == out
        data = json.loads(out.read_text(encoding="utf-8"))
        assert data == [{
            "question": "2+2=?",
            "options": ["3", "4", "5", "6"],
            "correct_option": "B",
        }]

    def test_write_when_empty_then_empty_list(self, tmp_path: Path):
        out = tmp_path / "questions.json"

        write_questions_json([], out)

        assert json.loads(out.read_text(encoding="utf-8")) == []

    def test_write_when_parent_missing_then_created(self, tmp_path: Path, sample_question):
        out = tmp_path / "nested" / "dir" / "questions.json"

        write_questions_json([sample_question], out)

        assert out.exists()

    def test_write_when_non_ascii_then_kept_readable(self, tmp_path: Path):
        from mcq_toolkit.core.models import MCQ
        q = MCQ("Café?", ("é", "ü", "ß", "ø"), correct_index=0)
        out = tmp_path / "questions.json"

        write_questions_json([q], out)

        assert "Café?" in out.read_text(encoding="utf-8")

    def test_write_when_indent_zero_then_still_valid_json(self, tmp_path: Path, sample_questions):
        out = tmp_path / "questions.json"

        write_questions_json(sample_questions, out, indent=0)

        assert len(json.loads(out.read_text(encoding="utf-8"))) == len(sample_questions)

    def test_write_when_target_is_directory_then_raises_export_error(self, tmp_path: Path, sample_question):
        out = tmp_path / "taken.json"
        out.mkdir()

        with pytest.raises(ExportError, match="Failed to write"):
            write_questions_json([sample_question], out)

        assert not (tmp_path / "taken.json.tmp").exists()

    def test_write_when_payload_invalid_then_refuses(self, tmp_path: Path, sample_question):
        out = tmp_path / "questions.json"
        bad_payload = [{"question": "p", "options": ["a"], "correct_option": "A"}]

        with patch(
            "mcq_toolkit.bank.output.json_writer.serialize_questions",
            return_value=bad_payload,
        ):
            with pytest.raises(ExportError, match="invalid bank"):
                write_questions_json([sample_question], out)

        assert not out.exists()

    def test_write_when_existing_file_then_replaced(self, tmp_path: Path, sample_question):
        out = tmp_path / "questions.json"
        out.write_text("old", encoding="utf-8")

        write_questions_json([sample_question], out)

        assert json.loads(out.read_text(encoding="utf-8"))[0]["question"] == "2+2=?"
