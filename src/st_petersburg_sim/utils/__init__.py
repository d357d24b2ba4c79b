"""Utility modules for the St. Petersburg simulator."""

from .config import SimulationConfig, runtime_config_from

__all__ = [
    "SimulationConfig",
    "runtime_config_from",
]
