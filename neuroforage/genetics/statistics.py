"""Per-generation fitness summary."""

from dataclasses import asdict, dataclass
from typing import Iterable, Sequence

import numpy as np

from neuroforage.exceptions import EmptyPopulationError
from neuroforage.genetics.individual import Individual


@dataclass(frozen=True)
class Statistics:
    min_fitness: float
    max_fitness: float
    avg_fitness: float
    median_fitness: float

    @classmethod
    def from_fitnesses(cls, fitnesses: Iterable[float]) -> "Statistics":
        values = np.sort(np.fromiter(fitnesses, dtype=np.float64))
        if values.size == 0:
            raise EmptyPopulationError("Cannot compute statistics of an empty population")

        middle = values.size // 2
        if values.size % 2 == 0:
            median = (values[middle - 1] + values[middle]) / 2
        else:
            median = values[middle]

        return cls(
            min_fitness=float(values[0]),
            max_fitness=float(values[-1]),
            avg_fitness=float(values.mean()),
            median_fitness=float(median),
        )

    @classmethod
    def from_population(cls, population: Sequence[Individual]) -> "Statistics":
        return cls.from_fitnesses(individual.fitness() for individual in population)

    def as_dict(self) -> dict:
        return asdict(self)

    def __str__(self):
        return (
            f"min={self.min_fitness:.2f}, max={self.max_fitness:.2f}, "
            f"avg={self.avg_fitness:.2f} median={self.median_fitness:.2f}"
        )
