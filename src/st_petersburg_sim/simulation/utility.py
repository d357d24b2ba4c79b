"""Utility strategies U(x) applied to each payout.

Natural log is the default. The other two are kept for experimenting with
risk attitudes and are reachable only from Python.
"""

from __future__ import annotations

import math
from typing import Dict, List

from .interfaces import UtilityFunction


def log_utility(x: float) -> float:
    """U(x) = ln(x). Not guarded for x <= 0; payouts are always >= 2."""
    return math.log(x)


def sqrt_utility(x: float) -> float:
    return math.sqrt(x)


def exponential_utility(x: float) -> float:
    """U(x) = 1 - e^-x, bounded above by 1."""
    return 1 - math.exp(-x)


DEFAULT_UTILITY: UtilityFunction = log_utility

UTILITY_FUNCTIONS: Dict[str, UtilityFunction] = {
    "log": log_utility,
    "sqrt": sqrt_utility,
    "exponential": exponential_utility,
}


def available_utilities() -> List[str]:
    return sorted(UTILITY_FUNCTIONS)


def get_utility_function(name: str) -> UtilityFunction:
    """Look up a utility strategy by name.

    Raises:
        KeyError: if ``name`` is not registered.
    """
    try:
        return UTILITY_FUNCTIONS[name.lower()]
    except KeyError:
        raise KeyError(
            f"Unknown utility '{name}'. Available: {', '.join(available_utilities())}"
        ) from None
