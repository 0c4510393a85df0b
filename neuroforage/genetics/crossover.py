"""Crossover operators: combine two parent chromosomes into a child."""

from abc import ABC, abstractmethod

import numpy as np

from neuroforage.exceptions import ChromosomeLengthError
from neuroforage.genetics.chromosome import Chromosome


class CrossoverMethod(ABC):

    @abstractmethod
    def crossover(self, rng: np.random.Generator,
                  parent_a: Chromosome, parent_b: Chromosome) -> Chromosome:
        """Produce a child chromosome from two equal-length parents."""


class UniformCrossover(CrossoverMethod):
    """Each gene comes from parent A or parent B with probability 0.5."""

    def crossover(self, rng, parent_a, parent_b):
        if len(parent_a) != len(parent_b):
            raise ChromosomeLengthError(
                f"Parents differ in length: {len(parent_a)} vs {len(parent_b)}"
            )
        from_a = rng.random(len(parent_a)) < 0.5
        return Chromosome(np.where(from_a, parent_a.genes, parent_b.genes))

    def __repr__(self):
        return "UniformCrossover()"
