from neuroforage.genetics import Chromosome, Individual


class GeneSumIndividual(Individual):
    """Test individual whose fitness is the (non-negative) sum of its genes."""

    def __init__(self, chromosome):
        self._chromosome = chromosome

    @classmethod
    def create(cls, chromosome):
        return cls(chromosome)

    @classmethod
    def of(cls, *genes):
        return cls(Chromosome(genes))

    def fitness(self):
        return max(0.0, float(self._chromosome.genes.sum()))

    def chromosome(self):
        return self._chromosome


class FitnessIndividual(Individual):
    """Test individual with a fixed fitness."""

    def __init__(self, fitness, chromosome=None):
        self._fitness = fitness
        self._chromosome = chromosome or Chromosome([fitness])

    @classmethod
    def create(cls, chromosome):
        return cls(0.0, chromosome)

    def fitness(self):
        return self._fitness

    def chromosome(self):
        return self._chromosome
