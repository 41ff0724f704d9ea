"""
Module: bank.controller

Purpose:
    Orchestrate the complete question-bank pipeline.
    Load → Parse → Shuffle options → Shuffle order → Export

Key Functions:
    - build_bank(): Main entry point for one run

Key Classes:
    - BuildResult: Complete build result
    - BuildError: Exception for build failures

Dependencies:
    - bank.loading: Reading and parsing
    - bank.shuffling: Randomization
    - bank.output: JSON export

Used By:
    - mcq_toolkit.cli: Command-line entry point
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Sequence

from mcq_toolkit.core.models import MCQ

from .config import BankConfig
from .loading import DiagnosticsCollector, LoaderError, ParseIssue, parse_questions, read_lines
from .output import ExportError, write_questions_json
from .shuffling import make_rng, shuffle_options, shuffle_order

logger = logging.getLogger(__name__)


class BuildError(Exception):
    """
    Error during build pipeline.

    Carries the records computed before the failure so a caller can retry
    the export without re-parsing.
    """

    def __init__(self, message: str, questions: Sequence[MCQ] = ()):
        super().__init__(message)
        self.questions = list(questions)


@dataclass(frozen=True)
class BuildResult:
    """
    Complete build result (immutable).

    Attributes:
        output_path: Path of the written JSON bank
        questions: Records in exported order
        issues: Blocks dropped by the parser
        seed: Seed used for shuffling (pass back via --seed to reproduce)
        source_available: False if the input could not be read
        truncated: True if max_questions cut parsing short
        report_path: Path of the diagnostics report, if written
        duration_seconds: Wall time of the run

    Example:
        >>> result = build_bank(config)
        >>> print(f"Exported {result.question_count} questions with seed {result.seed}")
    """
    output_path: Path
    questions: tuple[MCQ, ...]
    issues: tuple[ParseIssue, ...]
    seed: int
    source_available: bool = True
    truncated: bool = False
    report_path: Optional[Path] = None
    duration_seconds: float = 0.0

    @property
    def question_count(self) -> int:
        return len(self.questions)

    @property
    def skipped_count(self) -> int:
        return len(self.issues)


def build_bank(config: BankConfig) -> BuildResult:
    """
    Build a shuffled question bank from start to finish.

    Pipeline:
    1. Read lines from config.input_path
    2. Parse into MCQ records (malformed blocks dropped)
    3. Shuffle options inside each question
    4. Shuffle question order
    5. Write JSON to config.output_path
    6. (Optional) Write the parse diagnostics report

    A missing or unreadable input is logged and produces an empty export;
    it is not raised.

    Args:
        config: Build configuration

    Returns:
        BuildResult with records and metadata

    Raises:
        BuildError: If the export cannot be written

    Example:
        >>> config = BankConfig(
        ...     input_path=Path("questions.txt"),
        ...     output_path=Path("questions.json"),
        ... )
        >>> result = build_bank(config)
    """
    start_time = time.perf_counter()
    rng, seed = make_rng(config.seed)
    logger.info(f"Building question bank from {config.input_path} (seed {seed})")

    # 1. Load
    source_available = True
    try:
        lines = read_lines(config.input_path)
    except LoaderError as e:
        logger.error(f"Error opening question source: {e}")
        source_available = False
        lines = []

    # 2. Parse
    collector = DiagnosticsCollector(source=str(config.input_path))
    parsed = parse_questions(lines, max_questions=config.max_questions, collector=collector)
    questions: List[MCQ] = parsed.questions

    # 3. Shuffle options
    if config.shuffle_options:
        questions = shuffle_options(questions, rng)

    # 4. Shuffle order
    if config.shuffle_order:
        questions = shuffle_order(questions, rng, config.order_strategy)

    # 5. Export
    try:
        output_path = write_questions_json(
            questions,
            config.output_path,
            validate=config.validate_output,
            indent=config.indent,
        )
    except ExportError as e:
        raise BuildError(f"Failed to export questions: {e}", questions) from e

    # 6. Diagnostics report
    report_path = None
    if config.report_path is not None:
        try:
            collector.generate_report().save(config.report_path)
            report_path = config.report_path
        except OSError as e:
            logger.warning(f"Could not write diagnostics report {config.report_path}: {e}")

    duration = time.perf_counter() - start_time
    logger.info(
        f"Exported {len(questions)} questions "
        f"({parsed.skipped_count} skipped) in {duration:.3f}s"
    )

    return BuildResult(
        output_path=output_path,
        questions=tuple(questions),
        issues=tuple(parsed.issues),
        seed=seed,
        source_available=source_available,
        truncated=parsed.truncated,
        report_path=report_path,
        duration_seconds=duration,
    )
