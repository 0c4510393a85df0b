"""
Genetic algorithm engine.

One evolve() call turns a population into an equally sized population of
offspring. For every child:
1. pick parent A and parent B with the selection strategy (with replacement)
2. combine them with the crossover operator
3. mutate the child in place
4. materialize it with the individual type's create()
"""

from typing import List, Sequence, Tuple, Type, TypeVar

import numpy as np

from neuroforage.exceptions import EmptyPopulationError
from neuroforage.genetics.crossover import CrossoverMethod
from neuroforage.genetics.individual import Individual
from neuroforage.genetics.mutation import MutationMethod
from neuroforage.genetics.selection import SelectionMethod
from neuroforage.genetics.statistics import Statistics

I = TypeVar("I", bound=Individual)


class GeneticAlgorithm:

    def __init__(self, selection_method: SelectionMethod,
                 crossover_method: CrossoverMethod,
                 mutation_method: MutationMethod):
        self.selection_method = selection_method
        self.crossover_method = crossover_method
        self.mutation_method = mutation_method

    def evolve(self, rng: np.random.Generator,
               population: Sequence[I],
               individual_type: Type[I] = None) -> Tuple[List[I], Statistics]:
        """
        Produce the next generation.

        Args:
            rng: Random generator (the only source of randomness)
            population: Current generation, left untouched
            individual_type: Class whose create() builds offspring;
                defaults to the type of the first individual

        Returns:
            (offspring, statistics of the population passed in)
        """
        if len(population) == 0:
            raise EmptyPopulationError("Cannot evolve an empty population")

        individual_type = individual_type or type(population[0])

        # Ranking cache: sorted once per generation, shared by every selection.
        if self.selection_method.requires_ranking:
            pool = sorted(population, key=lambda individual: individual.fitness())
        else:
            pool = list(population)

        offspring = []
        for _ in range(len(population)):
            parent_a = self.selection_method.select(rng, pool).chromosome()
            parent_b = self.selection_method.select(rng, pool).chromosome()

            child = self.crossover_method.crossover(rng, parent_a, parent_b)
            self.mutation_method.mutate(rng, child)

            offspring.append(individual_type.create(child))

        return offspring, Statistics.from_population(population)
