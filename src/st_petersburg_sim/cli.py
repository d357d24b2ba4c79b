"""Command-line entry point for :mod:`st_petersburg_sim`.

Example
-------
python -m st_petersburg_sim.cli 1000 2.5 100

Arguments are positional: number of plays, cost per play, starting balance.
Options such as seeding or trial logs are read from config.env / the
environment (see :mod:`st_petersburg_sim.utils.config`).
"""

from __future__ import annotations

import re
import sys
from dataclasses import dataclass
from typing import Sequence

from .simulation.engine import SimulationEngine
from .simulation.logging import get_logger
from .utils.config import SimulationConfig, runtime_config_from

USAGE_MESSAGE = "Please enter 3 Parameters: Number plays, Cost, and Starting balance."
PLAYS_MESSAGE = "Please enter an integer value for Number of plays!"
COST_MESSAGE = "Please enter a double value for Cost!"
BALANCE_MESSAGE = "Please enter an double value for Starting Balance"
NEGATIVE_MESSAGE = "Please enter non-negative values for all parameters!"

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")
_DECIMAL_RE = re.compile(r"[+-]?(?:NaN|Infinity|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)")
_HEX_RE = re.compile(r"([+-]?)0[xX]([0-9a-fA-F]+\.?[0-9a-fA-F]*|\.[0-9a-fA-F]+)[pP]([+-]?[0-9]+)")
INT_MIN = -(2**31)
INT_MAX = 2**31 - 1


class InputValidationError(ValueError):
    """Raised for bad command-line input; the message is shown to the user."""


@dataclass(frozen=True, slots=True)
class SimulationArguments:
    plays: int
    cost: float
    starting_balance: float


def parse_integer(text: str) -> int:
    """Parse a signed 32-bit decimal integer."""
    if not _INTEGER_RE.fullmatch(text):
        raise ValueError(f"not an integer: {text!r}")
    value = int(text)
    if not INT_MIN <= value <= INT_MAX:
        raise ValueError(f"integer out of range: {text!r}")
    return value


def parse_real(text: str) -> float:
    """Parse a floating-point literal.

    Accepts the same forms as Java's Double.parseDouble: surrounding
    whitespace, an optional d/f suffix, hexadecimal literals with a binary
    exponent, and the exact spellings NaN and Infinity. Python-only forms
    such as underscores or lowercase inf are rejected.
    """
    literal = text.strip()
    if literal[-1:] in ("d", "D", "f", "F"):
        literal = literal[:-1]
        if literal.endswith(("NaN", "Infinity")):
            raise ValueError(f"not a number: {text!r}")
    hex_match = _HEX_RE.fullmatch(literal)
    if hex_match:
        sign, mantissa, exponent = hex_match.groups()
        try:
            return float.fromhex(f"{sign}0x{mantissa}p{exponent}")
        except OverflowError:
            return float(f"{sign}inf")
    if not _DECIMAL_RE.fullmatch(literal):
        raise ValueError(f"not a number: {text!r}")
    return float(literal)


def parse_arguments(argv: Sequence[str]) -> SimulationArguments:
    """Validate the three positional arguments.

    Checks run in a fixed order and the first failure wins.

    Raises:
        InputValidationError: with the message to print.
    """
    if len(argv) != 3:
        raise InputValidationError(USAGE_MESSAGE)

    try:
        plays = parse_integer(argv[0])
    except ValueError:
        raise InputValidationError(PLAYS_MESSAGE) from None

    try:
        cost = parse_real(argv[1])
    except ValueError:
        raise InputValidationError(COST_MESSAGE) from None

    try:
        starting_balance = parse_real(argv[2])
    except ValueError:
        raise InputValidationError(BALANCE_MESSAGE) from None

    if plays < 0 or cost < 0 or starting_balance < 0:
        raise InputValidationError(NEGATIVE_MESSAGE)

    return SimulationArguments(plays=plays, cost=cost, starting_balance=starting_balance)


def main(argv: Sequence[str] | None = None, *, config: SimulationConfig | None = None) -> int:
    argv = list(argv) if argv is not None else sys.argv[1:]

    try:
        args = parse_arguments(argv)
    except InputValidationError as e:
        print(e)
        return 1

    if config is None:
        config = SimulationConfig()
    logger = get_logger(config.log_level)

    engine = SimulationEngine(
        starting_balance=args.starting_balance,
        cost=args.cost,
        runtime_config=runtime_config_from(args.plays, config),
    )

    print("Updated Balances: ")
    for balance in engine.iter_balances():
        print(balance)
    result = engine.finalize()

    print(f"Largest Gain: {result.largest_gain}")
    print(f"Average Gain: {result.average_gain}")
    print(f"Average Utility: {result.average_utility}")

    if result.summary_stats:
        logger.info("Summary: %s", result.summary_stats)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
