"""
Module: bank.config

Purpose:
    Configuration dataclass for the question-bank pipeline. Immutable
    configuration with validation on construction.

Key Classes:
    - BankConfig: Main configuration for one load → shuffle → export run

Dependencies:
    - dataclasses (std)
    - pathlib (std)

Used By:
    - bank.controller: Main build controller
    - cli: Built from command-line arguments
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from mcq_toolkit.bank.shuffling.order import OrderStrategy

DEFAULT_INPUT = Path("questions.txt")
DEFAULT_OUTPUT = Path("questions.json")


@dataclass(frozen=True)
class BankConfig:
    """
    Configuration for building a shuffled question bank (immutable).

    Attributes:
        input_path: Plain-text question bank to read
        output_path: JSON file to write
        seed: Random seed; None draws a fresh time-based seed per run
        max_questions: Stop parsing after this many records (None = unbounded)
        shuffle_options: Permute options inside each question
        shuffle_order: Permute question order
        order_strategy: Algorithm for the question order shuffle
        validate_output: Validate payload with jsonschema before writing
        indent: JSON indentation
        report_path: Optional path for the parse diagnostics report

    Example:
        >>> config = BankConfig(
        ...     input_path=Path("questions.txt"),
        ...     output_path=Path("questions.json"),
        ...     seed=1234,
        ... )
    """

    # Required
    input_path: Path = DEFAULT_INPUT
    output_path: Path = DEFAULT_OUTPUT

    # Randomization
    seed: Optional[int] = None
    shuffle_options: bool = True
    shuffle_order: bool = True
    order_strategy: OrderStrategy = OrderStrategy.FISHER_YATES

    # Parsing
    max_questions: Optional[int] = None

    # Output
    validate_output: bool = True
    indent: int = 2
    report_path: Optional[Path] = None

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if self.max_questions is not None and self.max_questions <= 0:
            raise ValueError(f"max_questions must be positive: {self.max_questions}")
        if self.indent < 0:
            raise ValueError(f"indent must be non-negative: {self.indent}")
        if self.seed is not None and self.seed < 0:
            raise ValueError(f"seed must be non-negative: {self.seed}")
        if not isinstance(self.order_strategy, OrderStrategy):
            # Accept the CLI spelling ("legacy-swap")
            object.__setattr__(self, "order_strategy", OrderStrategy(self.order_strategy))
