"""An animal's brain: a network whose shape is derived from its eye."""

from typing import List

import numpy as np
import torch

from neuroforage.eye import Eye
from neuroforage.genetics import Chromosome
from neuroforage.neural_network import Network


class Brain:

    def __init__(self, network: Network):
        self.network = network

    @staticmethod
    def topology(eye: Eye) -> List[int]:
        """Eye cells in, twice as many hidden neurons, 2 outputs (speed, rotation)."""
        return [eye.cells, 2 * eye.cells, 2]

    @classmethod
    def random(cls, rng: np.random.Generator, eye: Eye) -> "Brain":
        return cls(Network.random(rng, cls.topology(eye)))

    @classmethod
    def from_chromosome(cls, chromosome: Chromosome, eye: Eye) -> "Brain":
        return cls(Network.from_weights(cls.topology(eye), chromosome.genes))

    def as_chromosome(self) -> Chromosome:
        return Chromosome(self.network.weights())

    def propagate(self, vision: np.ndarray) -> torch.Tensor:
        return self.network.propagate(vision)
