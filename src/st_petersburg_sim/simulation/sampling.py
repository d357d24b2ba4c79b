"""Coin flipping and payout computation for the St. Petersburg gamble."""

from __future__ import annotations

import numpy as np

from .interfaces import UniformSource

# Probability that a single flip lets the game continue.
CONTINUE_THRESHOLD = 0.5

# 2 ** 1024 no longer fits in a double, so the running mean raises
# OverflowError from this flip count on.
OVERFLOW_FLIPS = 1024


def create_uniform_source(seed: int | None = None) -> UniformSource:
    """Default random source: a numpy ``Generator`` (default-seeded if ``seed`` is None)."""
    return np.random.default_rng(seed)


def count_flips(source: UniformSource) -> int:
    """Flip until a draw falls below 0.5 and return the number of flips (>= 1)."""
    flips = 1
    while source.random() >= CONTINUE_THRESHOLD:
        flips += 1
    return flips


def payout(flips: int) -> int:
    """Payout for a game that lasted ``flips`` flips.

    Python ints never overflow here; see ``OVERFLOW_FLIPS`` for where the
    float statistics stop coping.
    """
    return 2 ** flips
