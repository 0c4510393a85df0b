"""
Neuroforage: animals with neural-network brains evolving to find food.
"""

from neuroforage.config import SimulationConfig, print_config
from neuroforage.eye import Eye
from neuroforage.genetics import GeneticAlgorithm, Statistics
from neuroforage.interface import create_random, step, train, world_snapshot
from neuroforage.neural_network import Network
from neuroforage.simulation import Simulation

__version__ = "0.1.0"

__all__ = [
    "Eye",
    "GeneticAlgorithm",
    "Network",
    "Simulation",
    "SimulationConfig",
    "Statistics",
    "create_random",
    "print_config",
    "step",
    "train",
    "world_snapshot",
]
