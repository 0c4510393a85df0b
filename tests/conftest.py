import numpy as np
import pytest

from neuroforage.config import SimulationConfig


@pytest.fixture
def rng():
    return np.random.default_rng(42)


@pytest.fixture
def small_config():
    return SimulationConfig(
        num_animals=6,
        num_foods=10,
        generation_length=5,
        selection_method="rank",
    )
