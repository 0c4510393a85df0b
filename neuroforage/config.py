"""
Configuration for the neuroforage simulation.

The module-level constants are the default tuning. Every simulation gets
its own SimulationConfig built from them, so several simulations with
different tuning can run side by side.
"""

import dataclasses
import math
from dataclasses import dataclass
from typing import Optional

from neuroforage.exceptions import ConfigError

# ==============================================================================
# WORLD SETTINGS
# ==============================================================================

NUM_ANIMALS = 40               # Animals per world (population size)
NUM_FOODS = 60                 # Food pieces per world
EAT_DISTANCE = 0.01            # Max animal-food distance that counts as eating
INITIAL_SPEED = 0.002          # Speed of a freshly spawned animal

# ==============================================================================
# EYE (VISION SENSOR)
# ==============================================================================

FOV_RANGE = 0.25               # How far an animal can see
FOV_ANGLE = math.pi + math.pi / 4  # Field of view, centered on the heading
EYE_CELLS = 9                  # Photoreceptors; also the NN input size

# ==============================================================================
# MOTION
# ==============================================================================

SPEED_MIN = 0.001              # Slowest an animal can fly
SPEED_MAX = 0.005              # Fastest an animal can fly
SPEED_ACCEL = 0.2              # Max speed change per tick
ROTATION_ACCEL = math.pi / 2   # Max rotation change per tick

# ==============================================================================
# EVOLUTION
# ==============================================================================

GENERATION_LENGTH = 2500       # Ticks between two evolutions
MUTATION_CHANCE = 0.01         # Per-gene probability of mutation
MUTATION_COEFF = 0.3           # Magnitude added to (or subtracted from) a mutated gene
SELECTION_METHOD = "roulette"  # "roulette" or "rank"
SELECTION_FLOOR = 0.0          # Minimum roulette weight per individual

SELECTION_METHODS = ("roulette", "rank")

# ==============================================================================
# OUTPUT
# ==============================================================================

VERBOSE = False                # Print statistics at each generation boundary


@dataclass(frozen=True)
class SimulationConfig:
    """Tuning for one simulation instance."""

    num_animals: int = NUM_ANIMALS
    num_foods: int = NUM_FOODS
    eat_distance: float = EAT_DISTANCE
    initial_speed: float = INITIAL_SPEED

    fov_range: float = FOV_RANGE
    fov_angle: float = FOV_ANGLE
    eye_cells: int = EYE_CELLS

    speed_min: float = SPEED_MIN
    speed_max: float = SPEED_MAX
    speed_accel: float = SPEED_ACCEL
    rotation_accel: float = ROTATION_ACCEL

    generation_length: int = GENERATION_LENGTH
    mutation_chance: float = MUTATION_CHANCE
    mutation_coeff: float = MUTATION_COEFF
    selection_method: str = SELECTION_METHOD
    selection_floor: float = SELECTION_FLOOR

    verbose: bool = VERBOSE

    def validate(self) -> "SimulationConfig":
        """Raise ConfigError if any value is unusable; return self otherwise."""
        if self.num_animals < 1:
            raise ConfigError(f"num_animals must be >= 1, got {self.num_animals}")
        if self.num_foods < 0:
            raise ConfigError(f"num_foods must be >= 0, got {self.num_foods}")
        if self.eye_cells < 1:
            raise ConfigError(f"eye_cells must be >= 1, got {self.eye_cells}")
        if self.fov_range <= 0 or self.fov_angle <= 0:
            raise ConfigError("fov_range and fov_angle must be positive")
        if self.speed_accel <= 0 or self.rotation_accel <= 0:
            raise ConfigError("speed_accel and rotation_accel must be positive")
        if self.eat_distance < 0:
            raise ConfigError(f"eat_distance must be non-negative, got {self.eat_distance}")
        if self.speed_min > self.speed_max:
            raise ConfigError(
                f"speed_min ({self.speed_min}) exceeds speed_max ({self.speed_max})"
            )
        if self.generation_length < 0:
            raise ConfigError("generation_length must be non-negative")
        if not 0.0 <= self.mutation_chance <= 1.0:
            raise ConfigError(
                f"mutation_chance must be within [0, 1], got {self.mutation_chance}"
            )
        if self.selection_method not in SELECTION_METHODS:
            raise ConfigError(
                f"Unknown selection method {self.selection_method!r}, "
                f"expected one of {SELECTION_METHODS}"
            )
        if self.selection_floor < 0:
            raise ConfigError("selection_floor must be non-negative")
        return self

    def with_overrides(self, **overrides) -> "SimulationConfig":
        """Copy of this config with some fields replaced."""
        known = {field.name for field in dataclasses.fields(self)}
        unknown = sorted(set(overrides) - known)
        if unknown:
            raise ConfigError(f"Unknown config parameter(s): {', '.join(unknown)}")
        return dataclasses.replace(self, **overrides).validate()

    def as_dict(self) -> dict:
        return dataclasses.asdict(self)


# ==============================================================================
# HELPER FUNCTIONS
# ==============================================================================

def print_config(config: Optional[SimulationConfig] = None):
    """Print current configuration."""
    config = config or SimulationConfig()

    print("\n" + "="*70)
    print("CONFIGURATION SUMMARY")
    print("="*70)

    print(f"\n[World]")
    print(f"  Animals: {config.num_animals}, Foods: {config.num_foods}")
    print(f"  Eat distance: {config.eat_distance}")

    print(f"\n[Eye]")
    print(f"  FOV range: {config.fov_range}")
    print(f"  FOV angle: {math.degrees(config.fov_angle):.1f} deg")
    print(f"  Cells: {config.eye_cells}")

    print(f"\n[Neural Network]")
    print(f"  Topology: {config.eye_cells} -> {2 * config.eye_cells} -> 2")

    print(f"\n[Motion]")
    print(f"  Speed: {config.speed_min}-{config.speed_max} (start {config.initial_speed})")
    print(f"  Acceleration: speed {config.speed_accel}, rotation {config.rotation_accel:.3f}")

    print(f"\n[Evolution]")
    print(f"  Generation length: {config.generation_length} ticks")
    print(f"  Selection: {config.selection_method} (floor {config.selection_floor})")
    print(f"  Mutation: chance {config.mutation_chance}, coeff {config.mutation_coeff}")

    print("="*70 + "\n")


if __name__ == "__main__":
    print_config()
