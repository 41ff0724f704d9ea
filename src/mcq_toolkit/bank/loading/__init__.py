"""
Module: bank.loading

Purpose:
    Question loading and parsing from the plain-text bank format.
    Produces MCQ records plus diagnostics for dropped blocks.

Key Functions:
    - read_lines(): Read the source file
    - parse_questions(): Parse lines into MCQ records

Used By:
    - bank.controller: Main build controller
"""

from .loader import read_lines, LoaderError
from .parser import parse_questions, ParseResult, QUESTION_MARKER, ANSWER_MARKER
from .diagnostics import (
    DiagnosticsCollector,
    IssueKind,
    ParseIssue,
    ParseDiagnosticsReport,
)

__all__ = [
    "read_lines",
    "LoaderError",
    "parse_questions",
    "ParseResult",
    "QUESTION_MARKER",
    "ANSWER_MARKER",
    "DiagnosticsCollector",
    "IssueKind",
    "ParseIssue",
    "ParseDiagnosticsReport",
]
