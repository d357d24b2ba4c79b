import sys
from pathlib import Path

import pytest

# Allow running tests without installing the package.
sys.path.insert(0, str(Path(__file__).resolve().parents[1] / "src"))

CONFIG_VARS = (
    "SIM_SEED",
    "RUN_NAME",
    "SHOW_PROGRESS",
    "ENABLE_TRIAL_LOG",
    "LOG_DIR",
    "SAVE_LOGS_CSV",
    "SAVE_LOGS_JSON",
    "LOG_LEVEL",
)


@pytest.fixture
def clean_env(monkeypatch):
    # setenv first so teardown also removes values written by config.env loading
    for var in CONFIG_VARS:
        monkeypatch.setenv(var, "")
        monkeypatch.delenv(var)
    return monkeypatch
