"""Pytest configuration and shared fixtures."""

import numpy as np
import pytest

from core.vector import Color
from materials.lambertian import Lambertian


class ScriptedRng:
    """Random source replaying fixed values, for steering sampling code paths."""

    def __init__(self, uniforms=(), randoms=()):
        self.uniforms = list(uniforms)
        self.randoms = list(randoms)

    def uniform(self, low=0.0, high=1.0):
        return self.uniforms.pop(0)

    def random(self):
        return self.randoms.pop(0)


@pytest.fixture
def rng():
    """Seeded numpy generator so stochastic code is repeatable."""
    return np.random.default_rng(12345)


@pytest.fixture
def scripted_rng():
    """Factory for a random source that returns scripted values."""
    return ScriptedRng


@pytest.fixture
def gray():
    return Lambertian(Color(0.5, 0.5, 0.5))
