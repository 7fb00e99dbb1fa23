"""
Tests for noise sources.

Copyright (c) 2026 pluckbank contributors

MIT License
"""

import pytest
import numpy as np
from pluckbank import NoiseSource, UniformNoise, SequenceNoise


class TestUniformNoise:
    """Test the numpy-backed white noise source."""

    def test_range(self):
        noise = UniformNoise(seed=0)
        values = np.array([noise.next_uniform() for _ in range(10000)])
        assert np.all(values >= -0.5)
        assert np.all(values < 0.5)
        # Roughly centred and spread across the interval
        assert abs(values.mean()) < 0.02
        assert values.min() < -0.45
        assert values.max() > 0.45

    def test_seed_reproducibility(self):
        n1 = UniformNoise(seed=42)
        n2 = UniformNoise(seed=42)
        assert [n1.next_uniform() for _ in range(20)] == [n2.next_uniform() for _ in range(20)]

    def test_different_seeds_differ(self):
        n1 = UniformNoise(seed=1)
        n2 = UniformNoise(seed=2)
        assert [n1.next_uniform() for _ in range(5)] != [n2.next_uniform() for _ in range(5)]

    def test_returns_float(self):
        assert type(UniformNoise(seed=3).next_uniform()) is float

    def test_is_noise_source(self):
        assert isinstance(UniformNoise(), NoiseSource)

    def test_repr(self):
        assert "seed=7" in repr(UniformNoise(seed=7))


class TestSequenceNoise:
    """Test the deterministic source used for repeatable plucks."""

    def test_cycles(self):
        noise = SequenceNoise([0.1, -0.2, 0.3])
        assert [noise.next_uniform() for _ in range(7)] == [0.1, -0.2, 0.3, 0.1, -0.2, 0.3, 0.1]

    def test_empty(self):
        with pytest.raises(ValueError, match="must not be empty"):
            SequenceNoise([])

    def test_out_of_range(self):
        with pytest.raises(ValueError, match="must be in"):
            SequenceNoise([0.5])
        with pytest.raises(ValueError, match="must be in"):
            SequenceNoise([-0.6])

    def test_lower_bound_inclusive(self):
        noise = SequenceNoise([-0.5])
        assert noise.next_uniform() == -0.5

    def test_abstract_base_not_instantiable(self):
        with pytest.raises(TypeError):
            NoiseSource()
