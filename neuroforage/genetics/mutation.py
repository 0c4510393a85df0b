"""Mutation operators: perturb a child chromosome in place."""

from abc import ABC, abstractmethod

import numpy as np

from neuroforage.exceptions import ConfigError
from neuroforage.genetics.chromosome import Chromosome


class MutationMethod(ABC):

    @abstractmethod
    def mutate(self, rng: np.random.Generator, child: Chromosome) -> None:
        """Mutate child's genes in place."""


class GaussianMutation(MutationMethod):
    """
    Nudge genes by a fixed magnitude.

    Every gene is mutated with probability `chance`; a mutated gene gets
    `coeff` added or subtracted (sign chosen uniformly). The magnitude is
    always exactly `coeff`, not a normal sample.

    Args:
        chance: Per-gene mutation probability in [0, 1]
        coeff: Magnitude of the change applied to a mutated gene
    """

    def __init__(self, chance: float, coeff: float):
        if not 0.0 <= chance <= 1.0:
            raise ConfigError(f"Mutation chance must be within [0, 1], got {chance}")
        self.chance = float(chance)
        self.coeff = float(coeff)

    def mutate(self, rng, child):
        n = len(child)
        sign = np.where(rng.random(n) < 0.5, -1.0, 1.0).astype(np.float32)
        mutated = rng.random(n) < self.chance
        child.genes += np.where(mutated, sign * np.float32(self.coeff), np.float32(0.0))

    def __repr__(self):
        return f"GaussianMutation(chance={self.chance}, coeff={self.coeff})"
