from neuroforage.genetics.chromosome import Chromosome
from neuroforage.genetics.crossover import CrossoverMethod, UniformCrossover
from neuroforage.genetics.engine import GeneticAlgorithm
from neuroforage.genetics.individual import Individual
from neuroforage.genetics.mutation import GaussianMutation, MutationMethod
from neuroforage.genetics.selection import (
    RankSelection,
    RouletteWheelSelection,
    SelectionMethod,
    make_selection_method,
)
from neuroforage.genetics.statistics import Statistics

__all__ = [
    "Chromosome",
    "CrossoverMethod",
    "GaussianMutation",
    "GeneticAlgorithm",
    "Individual",
    "MutationMethod",
    "RankSelection",
    "RouletteWheelSelection",
    "SelectionMethod",
    "Statistics",
    "UniformCrossover",
    "make_selection_method",
]
