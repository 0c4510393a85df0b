"""
Neuroforage - animals learning to find food

A population of animals flies around the unit torus. Each tick every
animal looks at nearby food through its eye, its brain turns that into a
speed and rotation change, and it moves. Food that gets touched is eaten
and respawns elsewhere. After a fixed number of ticks the population is
handed to a genetic algorithm (fitness = food eaten, genes = brain
weights) and replaced by the offspring.
"""

from typing import List, Optional

import numpy as np
from scipy.spatial.distance import cdist

from neuroforage.config import SimulationConfig
from neuroforage.exceptions import ConfigError
from neuroforage.eye import Eye
from neuroforage.genetics import (
    Chromosome,
    GaussianMutation,
    GeneticAlgorithm,
    Individual,
    Statistics,
    UniformCrossover,
    make_selection_method,
)
from neuroforage.geometry import heading, wrap_angle, wrap_unit
from neuroforage.world import Animal, World


# =============================================================================
# GENETIC ADAPTER
# =============================================================================
class AnimalIndividual(Individual):
    """An animal as the genetic algorithm sees it."""

    def __init__(self, fitness: float, chromosome: Chromosome):
        self._fitness = float(fitness)
        self._chromosome = chromosome

    @classmethod
    def from_animal(cls, animal: Animal) -> "AnimalIndividual":
        return cls(animal.satiation, animal.as_chromosome())

    @classmethod
    def create(cls, chromosome: Chromosome) -> "AnimalIndividual":
        return cls(0.0, chromosome)

    def fitness(self) -> float:
        return self._fitness

    def chromosome(self) -> Chromosome:
        return self._chromosome

    def into_animal(self, rng: np.random.Generator, eye: Eye, speed: float) -> Animal:
        return Animal.from_chromosome(rng, self._chromosome, eye, speed)


# =============================================================================
# SIMULATION
# =============================================================================
class Simulation:
    """Steps a world and evolves its animals every generation."""

    def __init__(self, config: SimulationConfig, world: World):
        self.config = config.validate()
        self.world = world
        self.age = 0
        self.generation = 0
        self.eye = Eye.from_config(config)
        mismatched = [animal for animal in world.animals if animal.eye != self.eye]
        if mismatched:
            raise ConfigError(
                f"{len(mismatched)} animal(s) have an eye other than the configured {self.eye!r}"
            )
        self.ga = GeneticAlgorithm(
            make_selection_method(config.selection_method, config.selection_floor),
            UniformCrossover(),
            GaussianMutation(config.mutation_chance, config.mutation_coeff),
        )

    @classmethod
    def random(cls, rng: np.random.Generator, config: Optional[SimulationConfig] = None) -> "Simulation":
        config = (config or SimulationConfig()).validate()
        return cls(config, World.random(rng, config))

    def step(self, rng: np.random.Generator) -> Optional[Statistics]:
        """
        Advance the world by one tick.

        Returns:
            Statistics of the finished generation if this tick ended one, else None
        """
        self._process_collisions(rng)
        self._process_brains()
        self._process_movements()

        self.age += 1
        if self.age > self.config.generation_length:
            return self._evolve(rng)
        return None

    def train(self, rng: np.random.Generator) -> Statistics:
        """Step until the current generation ends and return its statistics."""
        while True:
            statistics = self.step(rng)
            if statistics is not None:
                return statistics

    def snapshot(self) -> dict:
        return self.world.snapshot()

    # -------------------------------------------------------------------------
    # Per-tick passes
    # -------------------------------------------------------------------------
    def _process_collisions(self, rng: np.random.Generator):
        """Animals eat every food within reach; eaten food respawns at once."""
        foods = self.world.foods
        if not foods:
            return
        food_positions = self.world.food_positions()

        for animal in self.world.animals:
            distances = cdist(animal.position[np.newaxis, :], food_positions)[0]
            for index in np.flatnonzero(distances <= self.config.eat_distance):
                foods[index].respawn(rng)
                food_positions[index] = foods[index].position
                animal.satiation += 1

    def _process_brains(self):
        """Let every brain adjust its animal's speed and rotation."""
        config = self.config
        food_positions = self.world.food_positions()

        for animal in self.world.animals:
            vision = animal.eye.process_vision(animal.position, animal.rotation, food_positions)
            response = animal.brain.propagate(vision)

            speed = float(response[0].clamp(-config.speed_accel, config.speed_accel))
            rotation = float(response[1].clamp(-config.rotation_accel, config.rotation_accel))

            animal.speed = min(max(animal.speed + speed, config.speed_min), config.speed_max)
            animal.rotation = float(wrap_angle(animal.rotation + rotation))

    def _process_movements(self):
        for animal in self.world.animals:
            animal.position = wrap_unit(animal.position + heading(animal.rotation) * animal.speed)

    # -------------------------------------------------------------------------
    # Evolution
    # -------------------------------------------------------------------------
    def _evolve(self, rng: np.random.Generator) -> Statistics:
        """Replace the animals with evolved offspring and scatter the food."""
        self.age = 0

        population = [AnimalIndividual.from_animal(animal) for animal in self.world.animals]
        offspring, statistics = self.ga.evolve(rng, population, AnimalIndividual)

        self.world.animals = self._rebirth(rng, offspring)
        for food in self.world.foods:
            food.respawn(rng)

        self.generation += 1
        if self.config.verbose:
            print(f"[GENERATION] {self.generation}: {statistics}")
        return statistics

    def _rebirth(self, rng: np.random.Generator, offspring: List[AnimalIndividual]) -> List[Animal]:
        return [
            individual.into_animal(rng, self.eye, self.config.initial_speed)
            for individual in offspring
        ]
