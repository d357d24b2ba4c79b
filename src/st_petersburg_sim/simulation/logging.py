"""Diagnostic and data logging for simulation runs.

Two layers:
- a stdlib ``logging`` logger (``st_petersburg_sim``) for diagnostics on stderr
- :class:`TrialLogger`, which keeps one record per trial and can export them
  to CSV, JSON or a pandas DataFrame
"""

from __future__ import annotations

import csv
import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional

import pandas as pd

from .interfaces import TrialOutcome

LOGGER_NAME = "st_petersburg_sim"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def get_logger(level: int | str | None = None) -> logging.Logger:
    """Return the package logger, installing a stderr handler on first use."""
    logger = logging.getLogger(LOGGER_NAME)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
        logger.setLevel(logging.WARNING)
    if level is not None:
        logger.setLevel(level.upper() if isinstance(level, str) else level)
    return logger


TRIAL_FIELDS = ["trial", "played", "flips", "gain", "balance_before", "balance_after"]


@dataclass
class TrialLogger:
    """Logs every trial of a run.

    Each call to ``play_once`` produces one record, including skipped trials
    (``played=False``) so the file lines up with the printed balances.
    """

    log_dir: Path = Path("simulation_logs")
    run_id: str = "run_001"

    def __post_init__(self):
        self.trial_records: List[Dict[str, Any]] = []
        self.log_dir.mkdir(parents=True, exist_ok=True)

    def log_trial(self, outcome: TrialOutcome) -> None:
        self.trial_records.append(outcome.to_dict())

    def to_dataframe(self) -> pd.DataFrame:
        """Trial records as a DataFrame with one row per trial."""
        return pd.DataFrame(self.trial_records, columns=TRIAL_FIELDS)

    def save_to_csv(self) -> Dict[str, Path]:
        """Save the trial records to ``<run_id>_trials.csv``.

        Returns:
            Mapping of data type to file path (empty if nothing was logged)
        """
        saved_files = {}
        if self.trial_records:
            path = self.log_dir / f"{self.run_id}_trials.csv"
            with open(path, "w", newline="", encoding="utf-8") as f:
                writer = csv.DictWriter(f, fieldnames=TRIAL_FIELDS)
                writer.writeheader()
                writer.writerows(self.trial_records)
            saved_files["trials"] = path
        return saved_files

    def save_to_json(self) -> Dict[str, Path]:
        """Save the trial records to ``<run_id>_trials.json``."""
        saved_files = {}
        if self.trial_records:
            path = self.log_dir / f"{self.run_id}_trials.json"
            with open(path, "w", encoding="utf-8") as f:
                # gains can exceed what JSON consumers parse as numbers
                json.dump(self.trial_records, f, indent=2, default=str)
            saved_files["trials"] = path
        return saved_files

    def get_summary_stats(self) -> Dict[str, Any]:
        """Counts and balance movement for the run."""
        played = [r for r in self.trial_records if r["played"]]
        stats: Dict[str, Any] = {
            "run_id": self.run_id,
            "num_trials": len(self.trial_records),
            "num_played": len(played),
            "num_skipped": len(self.trial_records) - len(played),
        }
        if played:
            stats["max_flips"] = max(r["flips"] for r in played)
            stats["starting_balance"] = played[0]["balance_before"]
            stats["final_balance"] = played[-1]["balance_after"]
        return stats


def create_logger(run_id: str, log_dir: Optional[Path] = None) -> TrialLogger:
    """Create a trial logger.

    Args:
        run_id: Unique identifier for this run
        log_dir: Directory for log files (defaults to ./simulation_logs)
    """
    if log_dir is None:
        log_dir = Path("simulation_logs")

    return TrialLogger(log_dir=log_dir, run_id=run_id)
