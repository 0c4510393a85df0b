"""Angle and torus helpers shared by the eye and the simulation."""

import math

import numpy as np


def wrap_angle(angle):
    """Wrap an angle (scalar or array) into (-pi, pi]."""
    return math.pi - np.mod(math.pi - angle, 2 * math.pi)


def wrap_unit(values: np.ndarray) -> np.ndarray:
    """Wrap coordinates onto the unit torus [0, 1)."""
    wrapped = np.mod(values, 1.0)
    # np.mod of a tiny negative number can round up to exactly 1.0
    return np.where(wrapped >= 1.0, 0.0, wrapped)


def heading(rotation: float) -> np.ndarray:
    """Unit vector an animal with this rotation flies along (rotation 0 is +y)."""
    return np.array([-math.sin(rotation), math.cos(rotation)])


def bearing(vectors: np.ndarray) -> np.ndarray:
    """Signed angle from the +y axis to each vector of an [n, 2] array."""
    return np.arctan2(-vectors[:, 0], vectors[:, 1])
