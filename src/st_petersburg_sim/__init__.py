"""Monte Carlo simulator for repeated play of the St. Petersburg gamble."""

from .simulation.engine import SimulationEngine, SimulationRuntimeConfig, TrialEngine

__all__ = ["SimulationEngine", "SimulationRuntimeConfig", "TrialEngine"]
