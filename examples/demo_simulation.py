"""Compare utility strategies over the same sequence of games.

Run with:
    PYTHONPATH=src python examples/demo_simulation.py

Each strategy replays the same seeded coin flips, so only the utility
column differs between rows.
"""

from __future__ import annotations

from st_petersburg_sim import SimulationEngine, SimulationRuntimeConfig
from st_petersburg_sim.simulation import UTILITY_FUNCTIONS

SEED = 7
NUM_TRIALS = 100_000
COST = 10.0
STARTING_BALANCE = 1_000.0


def main() -> None:
    print(f"{NUM_TRIALS:,} games at cost {COST}, starting balance {STARTING_BALANCE}")
    print("-" * 72)
    for name, utility in UTILITY_FUNCTIONS.items():
        engine = SimulationEngine(
            starting_balance=STARTING_BALANCE,
            cost=COST,
            runtime_config=SimulationRuntimeConfig(
                num_trials=NUM_TRIALS,
                run_name=f"demo_{name}",
                seed=SEED,
                show_progress=True,
            ),
            utility=utility,
        )
        result = engine.run()
        print(
            f"{name:<12} played={result.plays:<7} skipped={result.skipped:<7} "
            f"largest={result.largest_gain:<9} avg_gain={result.average_gain:8.3f} "
            f"avg_utility={result.average_utility:.4f}"
        )


if __name__ == "__main__":
    main()
