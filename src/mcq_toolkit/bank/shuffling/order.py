"""
Module: bank.shuffling.order

Purpose:
    Permute the order of questions in the bank.

Key Functions:
    - shuffle_order(): Return the questions in a new random order

Key Classes:
    - OrderStrategy: Which permutation algorithm to use

Used By:
    - bank.controller: Build pipeline
    - bank.config: BankConfig.order_strategy
"""

from __future__ import annotations

import logging
import random
from enum import Enum
from typing import List, Sequence, TypeVar

from .options import permutation

logger = logging.getLogger(__name__)

T = TypeVar("T")


class OrderStrategy(str, Enum):
    """
    Question order permutation algorithm.

    FISHER_YATES: Uniform over all orderings (default).
    LEGACY_SWAP: Swap each position with a random position drawn from the
        whole range. Not uniform; kept for parity with the earlier
        swap-based ordering.
    """

    FISHER_YATES = "fisher-yates"
    LEGACY_SWAP = "legacy-swap"


def shuffle_order(
    questions: Sequence[T],
    rng: random.Random,
    strategy: OrderStrategy = OrderStrategy.FISHER_YATES,
) -> List[T]:
    """
    Return the questions in a new random order.

    The input sequence is not modified. Every input record appears exactly
    once in the output.

    Args:
        questions: Records to reorder
        rng: Seeded random source
        strategy: Permutation algorithm

    Returns:
        New list with the same records
    """
    if strategy is OrderStrategy.FISHER_YATES:
        result = [questions[i] for i in permutation(len(questions), rng)]
    elif strategy is OrderStrategy.LEGACY_SWAP:
        result = list(questions)
        size = len(result)
        for i in range(size):
            j = rng.randrange(size)
            result[i], result[j] = result[j], result[i]
    else:
        raise ValueError(f"Unknown order strategy: {strategy!r}")

    logger.debug(f"Reordered {len(result)} questions ({strategy.value})")
    return result
