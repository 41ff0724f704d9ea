"""
Module: bank

Purpose:
    Question-bank pipeline: read a plain-text bank, parse it into MCQ
    records, shuffle options and question order, and export JSON.

Key Functions:
    - read_lines(): Read the source file
    - parse_questions(): Parse lines into records
    - shuffle_options() / shuffle_order(): Randomize
    - write_questions_json(): Export
    - build_bank(): Run the whole pipeline

Key Classes:
    - BankConfig: Configuration for one run
    - BuildResult / BuildError: Pipeline outcome

Used By:
    - mcq_toolkit.cli: Command-line entry point
"""

from .config import BankConfig
from .loading import read_lines, parse_questions, LoaderError, ParseResult
from .shuffling import OrderStrategy, make_rng, shuffle_options, shuffle_order
from .output import write_questions_json, ExportError
from .controller import build_bank, BuildResult, BuildError

__all__ = [
    # Config
    "BankConfig",
    "OrderStrategy",
    # Loading
    "read_lines",
    "parse_questions",
    "LoaderError",
    "ParseResult",
    # Shuffling
    "make_rng",
    "shuffle_options",
    "shuffle_order",
    # Output
    "write_questions_json",
    "ExportError",
    # Controller
    "build_bank",
    "BuildResult",
    "BuildError",
]
