"""
Vision sensor.

The eye splits its field of view into `cells` equal angular sectors. Each
visible food adds energy to the sector it falls into; closer food adds
more energy, linearly from 1 (touching) to 0 (at the edge of the range).
"""

import math
from dataclasses import dataclass

import numpy as np

from neuroforage import config as defaults
from neuroforage.exceptions import ConfigError
from neuroforage.geometry import bearing, wrap_angle


@dataclass(frozen=True)
class Eye:
    fov_range: float = defaults.FOV_RANGE
    fov_angle: float = defaults.FOV_ANGLE
    cells: int = defaults.EYE_CELLS

    def __post_init__(self):
        if self.cells < 1:
            raise ConfigError(f"An eye needs at least one cell, got {self.cells}")
        if self.fov_range <= 0 or self.fov_angle <= 0:
            raise ConfigError("fov_range and fov_angle must be positive")

    @classmethod
    def from_config(cls, config) -> "Eye":
        return cls(fov_range=config.fov_range, fov_angle=config.fov_angle, cells=config.eye_cells)

    def process_vision(self, position, rotation: float, foods) -> np.ndarray:
        """
        Encode the foods around an animal as a sensory vector.

        Args:
            position: Animal position [x, y]
            rotation: Animal rotation in radians
            foods: [n, 2] array of food positions

        Returns:
            float32 array of length `cells`
        """
        cells = np.zeros(self.cells, dtype=np.float32)
        foods = np.asarray(foods, dtype=np.float64).reshape(-1, 2)
        if foods.shape[0] == 0:
            return cells

        vectors = foods - np.asarray(position, dtype=np.float64)
        distances = np.hypot(vectors[:, 0], vectors[:, 1])
        angles = wrap_angle(bearing(vectors) - rotation)

        visible = (distances <= self.fov_range) & (np.abs(angles) <= self.fov_angle / 2)
        if not visible.any():
            return cells

        # Shift into [0, fov_angle], normalize, then scale to a cell index.
        angles = (angles[visible] + self.fov_angle / 2) / self.fov_angle
        indices = np.minimum((angles * self.cells).astype(np.int64), self.cells - 1)
        energy = (self.fov_range - distances[visible]) / self.fov_range

        np.add.at(cells, indices, energy.astype(np.float32))
        return cells

    def __repr__(self):
        return f"Eye(fov_range={self.fov_range}, fov_angle={math.degrees(self.fov_angle):.1f}deg, cells={self.cells})"
