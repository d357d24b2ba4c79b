"""Trial engine and the loop that drives it."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Iterator, List, Mapping, Optional

from tqdm import tqdm

from .interfaces import TrialOutcome, UniformSource, UtilityFunction
from .logging import LOGGER_NAME, TrialLogger, create_logger
from .sampling import count_flips, create_uniform_source, payout
from .utility import DEFAULT_UTILITY


SourceFactory = Callable[[Optional[int]], UniformSource]

logger = logging.getLogger(LOGGER_NAME)


@dataclass(slots=True)
class SimulationState:
    """Money and running statistics of one player."""

    balance: float
    cost: float
    largest_gain: int = 0
    average_gain: float = 0.0
    average_utility: float = 0.0
    plays: int = 0


class TrialEngine:
    """Plays the gamble against a :class:`SimulationState`."""

    def __init__(
        self,
        state: SimulationState,
        *,
        source: UniformSource,
        utility: UtilityFunction = DEFAULT_UTILITY,
        trial_logger: TrialLogger | None = None,
    ) -> None:
        self.state = state
        self._source = source
        self._utility = utility
        self._trial_logger = trial_logger
        self._calls = 0
        self.skipped = 0

    def play_once(self) -> float:
        """Run one gamble and return the balance afterwards.

        Returns 0 without touching the state when the player cannot afford
        the cost. That 0 is indistinguishable from a real zero balance.
        """
        self._calls += 1
        state = self.state
        balance_before = state.balance

        if state.balance < state.cost:
            self.skipped += 1
            self._record(TrialOutcome(self._calls, False, 0, 0, balance_before, 0))
            return 0

        state.balance -= state.cost

        flips = count_flips(self._source)
        gain = payout(flips)
        self._add_gain(gain)

        state.balance += gain
        self._record(TrialOutcome(self._calls, True, flips, gain, balance_before, state.balance))
        return state.balance

    def _add_gain(self, gain: int) -> None:
        # both means weight the old value by the pre-increment play count
        state = self.state
        if gain > state.largest_gain:
            state.largest_gain = gain
        plays = state.plays
        new_plays = plays + 1
        state.average_gain = (state.average_gain * plays + gain) / new_plays
        state.average_utility = (state.average_utility * plays + self._utility(gain)) / new_plays
        state.plays = new_plays

    def _record(self, outcome: TrialOutcome) -> None:
        if self._trial_logger is not None:
            self._trial_logger.log_trial(outcome)
        if not outcome.played:
            logger.debug("Trial %d skipped: balance %s below cost %s", outcome.trial, outcome.balance_before, self.state.cost)


@dataclass(slots=True)
class SimulationRuntimeConfig:
    """Controls runtime behavior for the simulator."""

    num_trials: int
    run_name: str = "default"
    seed: int | None = None
    show_progress: bool = False
    enable_trial_log: bool = False
    log_dir: Path = Path("simulation_logs")
    save_logs_as_csv: bool = True
    save_logs_as_json: bool = True

    def __post_init__(self) -> None:
        if self.num_trials < 0:
            raise ValueError("num_trials must be non-negative.")


@dataclass(slots=True)
class SimulationResult:
    """Structured output of a finished run."""

    balances: List[float] = field(default_factory=list)
    largest_gain: int = 0
    average_gain: float = 0.0
    average_utility: float = 0.0
    plays: int = 0
    skipped: int = 0
    final_balance: float = 0.0
    trial_logger: Optional[TrialLogger] = None
    log_files: Mapping[str, Path] = field(default_factory=dict)
    summary_stats: Mapping[str, object] = field(default_factory=dict)


class SimulationEngine:
    """Runs a fixed number of trials for one player."""

    def __init__(
        self,
        *,
        starting_balance: float,
        cost: float,
        runtime_config: SimulationRuntimeConfig,
        source_factory: SourceFactory = create_uniform_source,
        utility: UtilityFunction = DEFAULT_UTILITY,
    ) -> None:
        self._config = runtime_config
        self.state = SimulationState(balance=starting_balance, cost=cost)

        self.trial_logger: Optional[TrialLogger] = None
        if runtime_config.enable_trial_log:
            self.trial_logger = create_logger(run_id=runtime_config.run_name, log_dir=runtime_config.log_dir)

        self.trial_engine = TrialEngine(
            self.state,
            source=source_factory(runtime_config.seed),
            utility=utility,
            trial_logger=self.trial_logger,
        )

    def iter_balances(self) -> Iterator[float]:
        """Yield the result of each ``play_once`` call, in order."""
        logger.info(
            "Starting run '%s': %d trials, cost=%s, balance=%s",
            self._config.run_name,
            self._config.num_trials,
            self.state.cost,
            self.state.balance,
        )
        with tqdm(
            total=self._config.num_trials,
            desc=self._config.run_name,
            unit="trial",
            disable=not self._config.show_progress,
        ) as pbar:
            for _ in range(self._config.num_trials):
                balance = self.trial_engine.play_once()
                pbar.update(1)
                yield balance
        logger.info("Finished run '%s': %d trials played", self._config.run_name, self.state.plays)

    def run(self) -> SimulationResult:
        """Execute every trial and collect the results."""
        balances = list(self.iter_balances())
        result = self.finalize()
        result.balances = balances
        return result

    def finalize(self) -> SimulationResult:
        """Build the result from the final state and write trial logs if enabled.

        Keeps no per-trial values, so streaming callers run in constant memory.
        """
        state = self.state
        result = SimulationResult(
            largest_gain=state.largest_gain,
            average_gain=state.average_gain,
            average_utility=state.average_utility,
            plays=state.plays,
            skipped=self.trial_engine.skipped,
            final_balance=state.balance,
            trial_logger=self.trial_logger,
        )

        if self.trial_logger:
            log_files = {}
            if self._config.save_logs_as_csv:
                log_files.update({f"{k}_csv": v for k, v in self.trial_logger.save_to_csv().items()})
            if self._config.save_logs_as_json:
                log_files.update({f"{k}_json": v for k, v in self.trial_logger.save_to_json().items()})
            result.log_files = log_files
            result.summary_stats = self.trial_logger.get_summary_stats()
            for path in log_files.values():
                logger.info("Wrote trial log %s", path)

        return result
