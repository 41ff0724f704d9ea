"""
Module: bank.shuffling.rng

Purpose:
    Create the random source for one run. Without an explicit seed a fresh
    one is taken from the clock so repeated runs over the same bank give
    different answer positions; the seed used is always returned so the
    run can be reproduced.
"""

from __future__ import annotations

import random
import time
from typing import Optional, Tuple

SEED_MODULUS = 2**32


def fresh_seed() -> int:
    """Time-based seed, different for every invocation."""
    return time.time_ns() % SEED_MODULUS


def make_rng(seed: Optional[int] = None) -> Tuple[random.Random, int]:
    """
    Build a seeded Random.

    Args:
        seed: Explicit seed, or None for a fresh time-based seed

    Returns:
        (rng, seed actually used)
    """
    if seed is None:
        seed = fresh_seed()
    return random.Random(seed), seed
