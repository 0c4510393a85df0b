import math

import numpy as np
import pytest

import neuroforage
from neuroforage.brain import Brain
from neuroforage.config import SimulationConfig
from neuroforage.exceptions import ConfigError, EmptySelectionError
from neuroforage.eye import Eye
from neuroforage.genetics import Statistics
from neuroforage.geometry import wrap_angle
from neuroforage.neural_network import Network
from neuroforage.simulation import AnimalIndividual, Simulation
from neuroforage.world import Animal, World


def run(seed, config, ticks):
    rng = np.random.default_rng(seed)
    sim = neuroforage.create_random(rng, config)
    statistics = [neuroforage.step(sim, rng) for _ in range(ticks)]
    return neuroforage.world_snapshot(sim), statistics


def constant_brain(speed_out, rotation_out, cells=9):
    """Brain that ignores its vision and always answers (speed_out, rotation_out)."""
    genes = np.zeros(2 * cells * (cells + 1) + 2 * (2 * cells + 1), dtype=np.float32)
    output_offset = 2 * cells * (cells + 1)
    genes[output_offset] = speed_out
    genes[output_offset + 2 * cells + 1] = rotation_out
    return Brain(Network.from_weights([cells, 2 * cells, 2], genes))


def lone_animal_simulation(config, speed, rotation, speed_out, rotation_out):
    animal = Animal(np.array([0.5, 0.5]), rotation, speed, Eye.from_config(config),
                    constant_brain(speed_out, rotation_out, config.eye_cells))
    return Simulation(config, World([animal], [])), animal


class TestBrain:

    def test_topology_follows_eye(self):
        assert Brain.topology(Eye(cells=9)) == [9, 18, 2]

    def test_chromosome_round_trip(self, rng):
        eye = Eye(cells=4)
        brain = Brain.random(rng, eye)

        rebuilt = Brain.from_chromosome(brain.as_chromosome(), eye)

        np.testing.assert_allclose(rebuilt.network.weights(), brain.network.weights(), atol=1e-6)

    def test_two_outputs(self, rng):
        brain = Brain.random(rng, Eye(cells=9))

        assert brain.propagate(np.zeros(9, dtype=np.float32)).shape == (2,)


class TestAnimalIndividual:

    def test_from_animal(self, rng, small_config):
        sim = Simulation.random(rng, small_config)
        animal = sim.world.animals[0]
        animal.satiation = 3

        individual = AnimalIndividual.from_animal(animal)

        assert individual.fitness() == 3.0
        assert len(individual.chromosome()) == 18 * 10 + 2 * 19
        assert individual.chromosome() == animal.brain.as_chromosome()

    def test_into_animal(self, rng):
        eye = Eye()
        chromosome = Brain.random(rng, eye).as_chromosome()

        animal = AnimalIndividual.create(chromosome).into_animal(rng, eye, 0.002)

        assert animal.satiation == 0
        assert animal.speed == 0.002
        assert animal.brain.as_chromosome() == chromosome
        assert np.all((animal.position >= 0.0) & (animal.position < 1.0))


class TestSimulation:

    def test_create_random(self, rng):
        sim = neuroforage.create_random(rng)

        snapshot = neuroforage.world_snapshot(sim)
        assert len(snapshot["animals"]) == 40
        assert len(snapshot["foods"]) == 60
        assert set(snapshot["animals"][0]) == {"x", "y", "rotation"}
        assert set(snapshot["foods"][0]) == {"x", "y"}

    def test_generation_boundary(self, rng, small_config):
        sim = Simulation.random(rng, small_config)

        for _ in range(small_config.generation_length):
            assert sim.step(rng) is None
        statistics = sim.step(rng)

        assert isinstance(statistics, Statistics)
        assert sim.age == 0
        assert sim.generation == 1

    def test_train(self, rng, small_config):
        sim = Simulation.random(rng, small_config)

        first = neuroforage.train(sim, rng)
        second = neuroforage.train(sim, rng)

        assert isinstance(first, Statistics) and isinstance(second, Statistics)
        assert sim.generation == 2
        assert len(sim.world.animals) == small_config.num_animals

    def test_determinism(self, small_config):
        snapshot_a, statistics_a = run(11, small_config, 20)
        snapshot_b, statistics_b = run(11, small_config, 20)

        assert snapshot_a == snapshot_b
        assert statistics_a == statistics_b
        assert sum(s is not None for s in statistics_a) == 3

    def test_different_seeds_differ(self, small_config):
        snapshot_a, _ = run(1, small_config, 3)
        snapshot_b, _ = run(2, small_config, 3)

        assert snapshot_a != snapshot_b

    def test_collisions_feed_animals(self, rng):
        config = SimulationConfig(num_animals=2, num_foods=3)
        sim = Simulation.random(rng, config)
        hungry, other = sim.world.animals
        hungry.position = np.array([0.1, 0.1])
        other.position = np.array([0.9, 0.9])
        sim.world.foods[0].position = np.array([0.1, 0.1])
        sim.world.foods[1].position = np.array([0.105, 0.1])
        sim.world.foods[2].position = np.array([0.5, 0.5])

        sim._process_collisions(rng)

        assert hungry.satiation == 2
        assert not np.array_equal(sim.world.foods[0].position, [0.1, 0.1])
        np.testing.assert_array_equal(sim.world.foods[2].position, [0.5, 0.5])

    def test_torus_wrap(self, rng, small_config):
        sim = Simulation.random(rng, small_config)
        animal = sim.world.animals[0]
        animal.position = np.array([0.5, 0.999])
        animal.rotation = 0.0
        animal.speed = 0.005

        sim._process_movements()

        assert animal.position[0] == pytest.approx(0.5)
        assert animal.position[1] == pytest.approx(0.004)

    def test_speed_and_rotation_stay_in_bounds(self, rng, small_config):
        sim = Simulation.random(rng, small_config)

        for _ in range(small_config.generation_length):
            sim.step(rng)
            for animal in sim.world.animals:
                assert small_config.speed_min <= animal.speed <= small_config.speed_max
                assert -math.pi < animal.rotation <= math.pi
                assert np.all((animal.position >= 0.0) & (animal.position < 1.0))

    def test_evolve_reports_previous_generation(self, rng):
        config = SimulationConfig(num_animals=4, num_foods=5, selection_method="roulette")
        sim = Simulation.random(rng, config)
        old_animals = list(sim.world.animals)
        old_foods = sim.world.food_positions()
        for animal, satiation in zip(old_animals, [0, 1, 1, 4]):
            animal.satiation = satiation

        statistics = sim._evolve(rng)

        assert statistics == Statistics(0.0, 4.0, 1.5, 1.0)
        assert len(sim.world.animals) == 4
        assert all(animal.satiation == 0 for animal in sim.world.animals)
        assert not any(animal in old_animals for animal in sim.world.animals)
        assert not np.array_equal(sim.world.food_positions(), old_foods)

    def test_roulette_with_no_food_eaten(self, rng):
        config = SimulationConfig(num_animals=4, num_foods=5, selection_method="roulette")
        sim = Simulation.random(rng, config)

        with pytest.raises(EmptySelectionError):
            sim._evolve(rng)

    def test_roulette_floor_with_no_food_eaten(self, rng):
        config = SimulationConfig(num_animals=4, num_foods=5, selection_method="roulette",
                                  selection_floor=1.0)
        sim = Simulation.random(rng, config)

        assert sim._evolve(rng) == Statistics(0.0, 0.0, 0.0, 0.0)

    def test_verbose_prints_statistics(self, rng, small_config, capsys):
        sim = Simulation.random(rng, small_config.with_overrides(verbose=True))

        sim.train(rng)

        assert "[GENERATION] 1: min=" in capsys.readouterr().out

    def test_rejects_animals_with_another_eye(self, rng):
        world = World.random(rng, SimulationConfig(num_animals=3, eye_cells=4))

        with pytest.raises(ConfigError):
            Simulation(SimulationConfig(num_animals=3), world)


class TestBrainPass:

    def test_responses_clamped_to_acceleration(self):
        config = SimulationConfig(num_animals=1, num_foods=0, speed_max=1.0)
        sim, animal = lone_animal_simulation(config, speed=0.1, rotation=0.0,
                                             speed_out=10.0, rotation_out=10.0)

        sim._process_brains()

        assert animal.speed == pytest.approx(0.1 + config.speed_accel)
        assert animal.rotation == pytest.approx(config.rotation_accel)

    def test_speed_clamped_to_speed_max(self):
        config = SimulationConfig(num_animals=1, num_foods=0)
        sim, animal = lone_animal_simulation(config, speed=0.004, rotation=0.0,
                                             speed_out=10.0, rotation_out=0.0)

        sim._process_brains()

        assert animal.speed == config.speed_max
        assert animal.rotation == 0.0

    def test_small_responses_pass_through_and_rotation_wraps(self):
        config = SimulationConfig(num_animals=1, num_foods=0, speed_max=1.0)
        sim, animal = lone_animal_simulation(config, speed=0.1, rotation=3.1,
                                             speed_out=0.05, rotation_out=0.1)

        sim._process_brains()

        assert animal.speed == pytest.approx(0.15)
        assert animal.rotation == pytest.approx(float(wrap_angle(3.2)))
        assert animal.rotation < 0.0
