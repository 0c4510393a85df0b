"""
The capability every evolvable object exposes to the genetic algorithm.

An individual reports a fitness score and a chromosome, and can be
recreated from a chromosome alone (the offspring produced by evolve()).
"""

from abc import ABC, abstractmethod

from neuroforage.genetics.chromosome import Chromosome


class Individual(ABC):
    """Base class for objects the genetic algorithm can evolve."""

    @classmethod
    @abstractmethod
    def create(cls, chromosome: Chromosome) -> "Individual":
        """Build a new individual carrying the given chromosome."""

    @abstractmethod
    def fitness(self) -> float:
        """Non-negative score; higher is better."""

    @abstractmethod
    def chromosome(self) -> Chromosome:
        """The individual's genotype."""
