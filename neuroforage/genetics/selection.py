"""
Parent selection strategies.

Strategies that need the population ordered by fitness declare
`requires_ranking = True`; the genetic algorithm then sorts a copy of the
population once per evolve() call and hands that ranked list to every
select() call of the generation.
"""

from abc import ABC, abstractmethod
from typing import Sequence

import numpy as np

from neuroforage.exceptions import ConfigError, EmptySelectionError, SelectionError
from neuroforage.genetics.individual import Individual


def choose_weighted(rng: np.random.Generator, population: Sequence[Individual], weights) -> Individual:
    """Pick one individual with probability proportional to its weight."""
    weights = np.asarray(weights, dtype=np.float64)
    if weights.size == 0:
        raise EmptySelectionError("Cannot select from an empty population")
    if not np.all(np.isfinite(weights)) or np.any(weights < 0):
        raise SelectionError(f"Selection weights must be finite and non-negative: {weights.tolist()}")
    total = weights.sum()
    if total <= 0:
        raise EmptySelectionError("Every individual has zero selection weight")
    index = rng.choice(weights.size, p=weights / total)
    return population[index]


class SelectionMethod(ABC):
    requires_ranking = False

    @abstractmethod
    def select(self, rng: np.random.Generator, population: Sequence[Individual]) -> Individual:
        """Return one parent drawn from population (with replacement)."""


class RouletteWheelSelection(SelectionMethod):
    """
    Fitness-proportional selection.

    Args:
        floor: Minimum weight given to every individual. With the default
            of 0, a population whose fitness is all zero raises
            EmptySelectionError instead of falling back to uniform choice.
    """

    def __init__(self, floor: float = 0.0):
        if floor < 0:
            raise ConfigError(f"Selection floor must be non-negative, got {floor}")
        self.floor = float(floor)

    def weights(self, population: Sequence[Individual]) -> np.ndarray:
        fitness = np.array([individual.fitness() for individual in population], dtype=np.float64)
        if self.floor:
            fitness = np.maximum(fitness, self.floor)
        return fitness

    def select(self, rng, population):
        return choose_weighted(rng, population, self.weights(population))

    def __repr__(self):
        return f"RouletteWheelSelection(floor={self.floor})"


class RankSelection(SelectionMethod):
    """
    Rank-proportional selection over a population sorted ascending by fitness.

    An individual's rank is 1 + the position of the first individual with
    an equal fitness value, so tied individuals share the lowest rank of
    their group. Weights are rank / (1 + 2 + ... + n).
    """

    requires_ranking = True

    @staticmethod
    def weights(population: Sequence[Individual]) -> np.ndarray:
        n = len(population)
        total = n * (n + 1) / 2
        first_position = {}
        ranks = []
        for position, individual in enumerate(population):
            fitness = individual.fitness()
            ranks.append(first_position.setdefault(fitness, position) + 1)
        return np.array(ranks, dtype=np.float64) / total

    def select(self, rng, population):
        return choose_weighted(rng, population, self.weights(population))

    def __repr__(self):
        return "RankSelection()"


def make_selection_method(name: str, floor: float = 0.0) -> SelectionMethod:
    """Build a selection strategy by name ("roulette" or "rank")."""
    if name == "roulette":
        return RouletteWheelSelection(floor)
    if name == "rank":
        return RankSelection()
    raise ConfigError(f"Unknown selection method: {name!r}")
