"""Animals, food and the world that holds them."""

import math
from typing import List

import numpy as np

from neuroforage.brain import Brain
from neuroforage.eye import Eye
from neuroforage.genetics import Chromosome
from neuroforage.geometry import wrap_angle


class Food:

    def __init__(self, position: np.ndarray):
        self.position = np.asarray(position, dtype=np.float64)

    @classmethod
    def random(cls, rng: np.random.Generator) -> "Food":
        return cls(rng.random(2))

    def respawn(self, rng: np.random.Generator):
        self.position = rng.random(2)


class Animal:
    """A flying agent steered by its brain."""

    def __init__(self, position, rotation: float, speed: float,
                 eye: Eye, brain: Brain, satiation: int = 0):
        self.position = np.asarray(position, dtype=np.float64)
        self.rotation = float(rotation)
        self.speed = float(speed)
        self.eye = eye
        self.brain = brain
        self.satiation = satiation  # food eaten this generation

    @classmethod
    def random(cls, rng: np.random.Generator, eye: Eye, speed: float) -> "Animal":
        brain = Brain.random(rng, eye)
        return cls._spawn(rng, eye, brain, speed)

    @classmethod
    def from_chromosome(cls, rng: np.random.Generator, chromosome: Chromosome,
                        eye: Eye, speed: float) -> "Animal":
        brain = Brain.from_chromosome(chromosome, eye)
        return cls._spawn(rng, eye, brain, speed)

    @classmethod
    def _spawn(cls, rng, eye, brain, speed):
        position = rng.random(2)
        rotation = float(wrap_angle(rng.uniform(-math.pi, math.pi)))
        return cls(position, rotation, speed, eye, brain)

    def as_chromosome(self) -> Chromosome:
        return self.brain.as_chromosome()

    def __repr__(self):
        return (
            f"Animal(position=({self.position[0]:.3f}, {self.position[1]:.3f}), "
            f"rotation={self.rotation:.3f}, speed={self.speed:.4f}, satiation={self.satiation})"
        )


class World:

    def __init__(self, animals: List[Animal], foods: List[Food]):
        self.animals = animals
        self.foods = foods

    @classmethod
    def random(cls, rng: np.random.Generator, config) -> "World":
        eye = Eye.from_config(config)
        animals = [Animal.random(rng, eye, config.initial_speed) for _ in range(config.num_animals)]
        foods = [Food.random(rng) for _ in range(config.num_foods)]
        return cls(animals, foods)

    def food_positions(self) -> np.ndarray:
        if not self.foods:
            return np.empty((0, 2))
        return np.stack([food.position for food in self.foods])

    def snapshot(self) -> dict:
        """Read-only view for a renderer: positions and rotations only."""
        return {
            "animals": [
                {"x": float(animal.position[0]), "y": float(animal.position[1]),
                 "rotation": float(animal.rotation)}
                for animal in self.animals
            ],
            "foods": [
                {"x": float(food.position[0]), "y": float(food.position[1])}
                for food in self.foods
            ],
        }
