"""Exports for the simulation subpackage."""

from .engine import (
    SimulationEngine,
    SimulationResult,
    SimulationRuntimeConfig,
    SimulationState,
    TrialEngine,
)
from .interfaces import TrialOutcome, UniformSource, UtilityFunction
from .logging import TrialLogger, create_logger, get_logger
from .sampling import OVERFLOW_FLIPS, count_flips, create_uniform_source, payout
from .utility import (
    DEFAULT_UTILITY,
    UTILITY_FUNCTIONS,
    exponential_utility,
    get_utility_function,
    log_utility,
    sqrt_utility,
)

__all__ = [
    "SimulationEngine",
    "SimulationRuntimeConfig",
    "SimulationResult",
    "SimulationState",
    "TrialEngine",
    "TrialOutcome",
    "UniformSource",
    "UtilityFunction",
    "TrialLogger",
    "create_logger",
    "get_logger",
    "OVERFLOW_FLIPS",
    "count_flips",
    "create_uniform_source",
    "payout",
    "DEFAULT_UTILITY",
    "UTILITY_FUNCTIONS",
    "exponential_utility",
    "get_utility_function",
    "log_utility",
    "sqrt_utility",
]
