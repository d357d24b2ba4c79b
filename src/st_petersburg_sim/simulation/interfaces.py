"""Protocol definitions that the trial engine depends on.

Concrete random sources and utility strategies live in
:mod:`.sampling` and :mod:`.utility`.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, Protocol


class UniformSource(Protocol):
    """Produces independent uniform draws in ``[0, 1)``.

    ``numpy.random.Generator`` and ``random.Random`` both satisfy this.
    """

    def random(self) -> float:
        ...


class UtilityFunction(Protocol):
    """Maps a payout to its subjective value."""

    def __call__(self, x: float) -> float:
        ...


@dataclass(frozen=True, slots=True)
class TrialOutcome:
    """Record of a single ``play_once`` call."""

    trial: int
    played: bool
    flips: int
    gain: int
    balance_before: float
    balance_after: float

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
