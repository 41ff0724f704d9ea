"""
Module: bank.loading.parser

Purpose:
    Turn the lines of a plain-text question bank into validated MCQ
    records. Malformed blocks are dropped and recorded as diagnostics;
    parsing itself never fails.

Format:
    QUESTION: What is 2+2?
    A: 3
    B: 4
    C: 5
    D: 6
    ANSWER: B

    - Option letters pick the slot, so options may appear in any order
    - Letters are case-insensitive; only A-D are accepted
    - Lines outside a block that are not QUESTION: markers are ignored

Key Functions:
    - parse_questions(): Parse a sequence of lines

Key Classes:
    - ParseResult: Records, issues and truncation flag

Dependencies:
    - core.models: MCQ, letter mapping
    - bank.loading.diagnostics: Issue collection

Used By:
    - bank.controller: Main build controller
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Tuple

from mcq_toolkit.core.models import MCQ, OPTION_COUNT, is_option_letter, letter_to_index
from mcq_toolkit.core.utils.text import split_marker, trim

from .diagnostics import DiagnosticsCollector, IssueKind, ParseIssue

logger = logging.getLogger(__name__)

QUESTION_MARKER = "QUESTION:"
ANSWER_MARKER = "ANSWER:"

# "<letter>:<text>" on a trimmed line; the letter range is checked separately
OPTION_PATTERN = re.compile(r"^(?P<letter>\S):(?P<text>.*)$", re.DOTALL)


@dataclass(frozen=True)
class ParseResult:
    """
    Output of parse_questions().

    Attributes:
        questions: Valid records in source order
        issues: Dropped blocks, in source order
        truncated: True if max_questions stopped parsing with another QUESTION:
            marker still unread
        lines_read: Number of lines consumed
    """
    questions: List[MCQ]
    issues: List[ParseIssue] = field(default_factory=list)
    truncated: bool = False
    lines_read: int = 0

    @property
    def question_count(self) -> int:
        return len(self.questions)

    @property
    def skipped_count(self) -> int:
        return len(self.issues)


class _LineCursor:
    """Forward-only reader over numbered lines."""

    def __init__(self, lines: List[str]):
        self._lines = lines
        self.line_number = 0  # 1-based number of the last line returned

    def next(self) -> Optional[Tuple[int, str]]:
        if self.line_number >= len(self._lines):
            return None
        self.line_number += 1
        return self.line_number, self._lines[self.line_number - 1]

    def remaining(self) -> List[str]:
        return self._lines[self.line_number:]


def parse_questions(
    lines: Iterable[str],
    *,
    max_questions: Optional[int] = None,
    collector: Optional[DiagnosticsCollector] = None,
) -> ParseResult:
    """
    Parse question blocks from lines.

    Process:
    1. Skip lines until one starts with "QUESTION:"
    2. Read exactly four option lines into slots A-D
    3. Read the "ANSWER:" line
    4. Keep the record, or drop the block and record why

    Lines consumed by a dropped block are never re-read as markers.

    Args:
        lines: Raw lines, with or without terminators
        max_questions: Stop after this many records (None = unbounded)
        collector: Collector for dropped blocks (a new one if None)

    Returns:
        ParseResult with records and issues

    Example:
        >>> result = parse_questions([
        ...     "QUESTION: 2+2=?", "A: 3", "B: 4", "C: 5", "D: 6", "ANSWER: B",
        ... ])
        >>> result.questions[0].correct_text
        '4'
    """
    if collector is None:
        collector = DiagnosticsCollector()
    start_issues = collector.issue_count

    cursor = _LineCursor(list(lines))
    questions: List[MCQ] = []
    truncated = False

    while True:
        entry = cursor.next()
        if entry is None:
            break

        _, raw = entry
        remainder = split_marker(raw, QUESTION_MARKER)
        if remainder is None:
            continue

        question = _parse_block(trim(remainder), cursor, collector)
        if question is None:
            continue

        questions.append(question)
        if max_questions is not None and len(questions) >= max_questions:
            truncated = any(
                split_marker(raw, QUESTION_MARKER) is not None
                for raw in cursor.remaining()
            )
            if truncated:
                logger.warning(
                    f"Reached limit of {max_questions} questions at line "
                    f"{cursor.line_number}; remaining input ignored"
                )
            break

    issues = collector.issues[start_issues:]
    logger.info(
        f"Parsed {len(questions)} questions from {cursor.line_number} lines "
        f"({len(issues)} skipped)"
    )
    return ParseResult(
        questions=questions,
        issues=issues,
        truncated=truncated,
        lines_read=cursor.line_number,
    )


def _parse_block(
    prompt: str,
    cursor: _LineCursor,
    collector: DiagnosticsCollector,
) -> Optional[MCQ]:
    """Read four options and the answer following a QUESTION: line."""
    slots: List[Optional[str]] = [None] * OPTION_COUNT

    for _ in range(OPTION_COUNT):
        entry = cursor.next()
        if entry is None:
            collector.add(
                IssueKind.TRUNCATED_BLOCK,
                cursor.line_number,
                f"Input ended before all {OPTION_COUNT} options of {prompt!r}",
                prompt=prompt,
            )
            return None

        line_number, raw = entry
        text = trim(raw)
        option = _parse_option(text)
        if option is None:
            collector.add(
                IssueKind.INVALID_OPTION,
                line_number,
                f"Skipping question {prompt!r} with invalid option line: {text!r}",
                value=text,
                prompt=prompt,
            )
            return None

        index, option_text = option
        if slots[index] is not None:
            collector.add(
                IssueKind.DUPLICATE_OPTION,
                line_number,
                f"Skipping question {prompt!r} with repeated option {text[0].upper()}",
                value=text,
                prompt=prompt,
            )
            return None
        slots[index] = option_text

    entry = cursor.next()
    if entry is None:
        collector.add(
            IssueKind.MISSING_ANSWER,
            cursor.line_number,
            f"Input ended before ANSWER of {prompt!r}",
            prompt=prompt,
        )
        return None

    line_number, raw = entry
    text = trim(raw)
    answer = split_marker(text, ANSWER_MARKER)
    if answer is None:
        collector.add(
            IssueKind.MISSING_ANSWER,
            line_number,
            f"Skipping question {prompt!r} without ANSWER line, found: {text!r}",
            value=text,
            prompt=prompt,
        )
        return None

    answer = trim(answer)
    if not is_option_letter(answer):
        collector.add(
            IssueKind.INVALID_ANSWER,
            line_number,
            f"Skipping question {prompt!r} with invalid ANSWER: {answer}",
            value=answer,
            prompt=prompt,
        )
        return None

    return MCQ(
        prompt=prompt,
        options=tuple(slots),
        correct_index=letter_to_index(answer),
    )


def _parse_option(text: str) -> Optional[Tuple[int, str]]:
    """
    Parse a trimmed option line.

    Returns:
        (slot index, trimmed option text), or None if the line is not a
        valid A-D option. Empty option text is allowed.
    """
    match = OPTION_PATTERN.match(text)
    if not match or not is_option_letter(match.group("letter")):
        return None
    return letter_to_index(match.group("letter")), trim(match.group("text"))
