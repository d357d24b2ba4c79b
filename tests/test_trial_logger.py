import csv
import json

from st_petersburg_sim.simulation import TrialOutcome, create_logger
from st_petersburg_sim.simulation.logging import TRIAL_FIELDS, get_logger


def _populated_logger(tmp_path):
    trial_logger = create_logger(run_id="unit", log_dir=tmp_path / "logs")
    trial_logger.log_trial(TrialOutcome(1, True, 3, 8, 10.0, 17.0))
    trial_logger.log_trial(TrialOutcome(2, True, 1, 2, 17.0, 18.0))
    trial_logger.log_trial(TrialOutcome(3, False, 0, 0, 18.0, 0))
    return trial_logger


def test_create_logger_makes_log_dir(tmp_path):
    trial_logger = create_logger(run_id="unit", log_dir=tmp_path / "nested" / "logs")
    assert trial_logger.log_dir.is_dir()
    assert trial_logger.trial_records == []


def test_empty_logger_writes_nothing(tmp_path):
    trial_logger = create_logger(run_id="empty", log_dir=tmp_path)
    assert trial_logger.save_to_csv() == {}
    assert trial_logger.save_to_json() == {}
    assert list(tmp_path.iterdir()) == []


def test_save_to_csv(tmp_path):
    trial_logger = _populated_logger(tmp_path)

    saved = trial_logger.save_to_csv()

    assert saved == {"trials": tmp_path / "logs" / "unit_trials.csv"}
    with open(saved["trials"], newline="", encoding="utf-8") as f:
        rows = list(csv.DictReader(f))
    assert list(rows[0]) == TRIAL_FIELDS
    assert [row["gain"] for row in rows] == ["8", "2", "0"]
    assert rows[2]["played"] == "False"


def test_save_to_json(tmp_path):
    trial_logger = _populated_logger(tmp_path)

    saved = trial_logger.save_to_json()

    data = json.loads(saved["trials"].read_text(encoding="utf-8"))
    assert len(data) == 3
    assert data[0] == {
        "trial": 1,
        "played": True,
        "flips": 3,
        "gain": 8,
        "balance_before": 10.0,
        "balance_after": 17.0,
    }


def test_to_dataframe(tmp_path):
    frame = _populated_logger(tmp_path).to_dataframe()

    assert list(frame.columns) == TRIAL_FIELDS
    assert len(frame) == 3
    assert frame.loc[frame["played"], "gain"].tolist() == [8, 2]


def test_empty_dataframe_keeps_columns(tmp_path):
    frame = create_logger(run_id="empty", log_dir=tmp_path).to_dataframe()
    assert list(frame.columns) == TRIAL_FIELDS
    assert frame.empty


def test_summary_stats(tmp_path):
    stats = _populated_logger(tmp_path).get_summary_stats()

    assert stats == {
        "run_id": "unit",
        "num_trials": 3,
        "num_played": 2,
        "num_skipped": 1,
        "max_flips": 3,
        "starting_balance": 10.0,
        "final_balance": 18.0,
    }


def test_get_logger_installs_single_handler():
    logger = get_logger("debug")
    again = get_logger()

    assert logger is again
    assert len(logger.handlers) == 1
    assert logger.level == 10
    get_logger("WARNING")
