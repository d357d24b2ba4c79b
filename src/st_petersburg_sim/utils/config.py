"""Configuration management for the St. Petersburg simulator.

Reads configuration from a config.env file or environment variables. These
settings cover seeding, logging and progress output only; the number of
plays, the cost and the starting balance always come from the command line.
"""

import os
from pathlib import Path
from typing import Optional

from ..simulation.engine import SimulationRuntimeConfig


def _as_bool(value: str) -> bool:
    return value.strip().lower() in ("true", "1", "yes", "on")


class SimulationConfig:
    """Configuration manager for simulation settings."""

    def __init__(self, config_file: Optional[str] = None):
        """
        Initialize configuration.

        Args:
            config_file: Path to .env file (default: config.env in project root)
        """
        self._load_env(config_file)

    def _load_env(self, config_file: Optional[str]):
        """Load environment variables from file."""
        if config_file is None:
            # Look for config.env in project root
            project_root = Path(__file__).parent.parent.parent.parent
            config_file = project_root / "config.env"

        config_path = Path(config_file)
        if config_path.exists():
            with open(config_path) as f:
                for line in f:
                    line = line.strip()
                    if line and not line.startswith('#') and '=' in line:
                        key, value = line.split('=', 1)
                        key = key.strip()
                        value = value.strip()
                        # Don't override existing env vars
                        if key not in os.environ:
                            os.environ[key] = value

    @property
    def seed(self) -> Optional[int]:
        """Seed for the random source; None means default seeding."""
        value = os.getenv("SIM_SEED", "").strip()
        return int(value) if value else None

    @property
    def run_name(self) -> str:
        return os.getenv("RUN_NAME", "default")

    @property
    def show_progress(self) -> bool:
        """Get whether to draw a progress bar on stderr."""
        return _as_bool(os.getenv("SHOW_PROGRESS", "false"))

    @property
    def enable_trial_log(self) -> bool:
        """Get whether per-trial records are kept and written out."""
        return _as_bool(os.getenv("ENABLE_TRIAL_LOG", "false"))

    @property
    def save_logs_csv(self) -> bool:
        return _as_bool(os.getenv("SAVE_LOGS_CSV", "true"))

    @property
    def save_logs_json(self) -> bool:
        return _as_bool(os.getenv("SAVE_LOGS_JSON", "true"))

    @property
    def log_dir(self) -> Path:
        """Get log directory path."""
        return Path(os.getenv("LOG_DIR", "simulation_logs"))

    @property
    def log_level(self) -> str:
        return os.getenv("LOG_LEVEL", "WARNING").upper()


def runtime_config_from(
    num_trials: int,
    config: Optional[SimulationConfig] = None,
) -> SimulationRuntimeConfig:
    """
    Build the runtime config for a run of ``num_trials`` trials.

    Args:
        num_trials: Number of trials to play
        config: Configuration object (default: loads from config.env)

    Example:
        >>> runtime = runtime_config_from(100)
        >>> engine = SimulationEngine(starting_balance=50.0, cost=2.0, runtime_config=runtime)
    """
    if config is None:
        config = SimulationConfig()

    return SimulationRuntimeConfig(
        num_trials=num_trials,
        run_name=config.run_name,
        seed=config.seed,
        show_progress=config.show_progress,
        enable_trial_log=config.enable_trial_log,
        log_dir=config.log_dir,
        save_logs_as_csv=config.save_logs_csv,
        save_logs_as_json=config.save_logs_json,
    )
