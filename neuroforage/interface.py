"""Functions a host (renderer, notebook, script) drives the simulation with."""

from typing import Optional

import numpy as np

from neuroforage.config import SimulationConfig
from neuroforage.genetics import Statistics
from neuroforage.simulation import Simulation


def create_random(rng: np.random.Generator, config: Optional[SimulationConfig] = None) -> Simulation:
    return Simulation.random(rng, config)


def world_snapshot(simulation: Simulation) -> dict:
    """{"animals": [{"x", "y", "rotation"}], "foods": [{"x", "y"}]}"""
    return simulation.snapshot()


def step(simulation: Simulation, rng: np.random.Generator) -> Optional[Statistics]:
    return simulation.step(rng)


def train(simulation: Simulation, rng: np.random.Generator) -> Statistics:
    return simulation.train(rng)
