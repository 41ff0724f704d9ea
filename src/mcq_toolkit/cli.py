"""
Command-line entry point.

    mcq-toolkit questions.txt -o questions.json --seed 42 --report issues.json

Reads a plain-text question bank, shuffles options and question order, and
writes the JSON bank. A missing input is reported and an empty bank is
still written.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from mcq_toolkit import __version__
from mcq_toolkit.bank import BankConfig, BuildError, OrderStrategy, build_bank
from mcq_toolkit.bank.config import DEFAULT_INPUT, DEFAULT_OUTPUT

logger = logging.getLogger(__name__)


def configure_logging(verbosity: int = 0) -> None:
    """
    Configure root logging for command-line use.

    Args:
        verbosity: -1 = warnings only, 0 = info, 1+ = debug
    """
    if verbosity < 0:
        level = logging.WARNING
    elif verbosity == 0:
        level = logging.INFO
    else:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(message)s", force=True)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mcq-toolkit",
        description="Shuffle a plain-text multiple-choice question bank into JSON",
    )
    parser.add_argument("input", nargs="?", type=Path, default=DEFAULT_INPUT,
                        help=f"Question bank text file (default: {DEFAULT_INPUT})")
    parser.add_argument("--output", "-o", type=Path, default=DEFAULT_OUTPUT,
                        help=f"JSON output path (default: {DEFAULT_OUTPUT})")
    parser.add_argument("--seed", type=int, default=None,
                        help="Random seed (default: fresh per run)")
    parser.add_argument("--max-questions", type=int, default=None,
                        help="Stop after this many questions")
    parser.add_argument("--order-strategy", default=OrderStrategy.FISHER_YATES.value,
                        choices=[s.value for s in OrderStrategy],
                        help="Question order shuffle algorithm")
    parser.add_argument("--no-shuffle-options", action="store_true",
                        help="Keep options in A-D order")
    parser.add_argument("--no-shuffle-order", action="store_true",
                        help="Keep questions in source order")
    parser.add_argument("--report", type=Path, default=None,
                        help="Write a JSON report of skipped questions")
    parser.add_argument("--no-validate", action="store_true",
                        help="Skip schema validation of the output")
    parser.add_argument("--indent", type=int, default=2, help="JSON indentation")
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("--verbose", "-v", action="count", default=0)
    verbosity.add_argument("--quiet", "-q", action="store_true")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(-1 if args.quiet else args.verbose)

    try:
        config = BankConfig(
            input_path=args.input,
            output_path=args.output,
            seed=args.seed,
            max_questions=args.max_questions,
            shuffle_options=not args.no_shuffle_options,
            shuffle_order=not args.no_shuffle_order,
            order_strategy=OrderStrategy(args.order_strategy),
            validate_output=not args.no_validate,
            indent=args.indent,
            report_path=args.report,
        )
    except ValueError as e:
        logger.error(f"Invalid configuration: {e}")
        return 1

    try:
        result = build_bank(config)
    except BuildError as e:
        logger.error(f"Build failed: {e}")
        return 1

    if result.truncated:
        logger.warning(f"Stopped at {config.max_questions} questions; rest of input ignored")
    logger.info(
        f"Done: {result.question_count} questions -> {result.output_path} "
        f"(seed {result.seed})"
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
