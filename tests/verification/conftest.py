"""
Property-based verification of the quaternion algebra.

Random rotations are drawn from a seeded generator so failures are
reproducible. Results are cross-checked against scipy.spatial.transform.
"""

import numpy as np
import pytest

from quatkit import Quaternion, from_tuple, normalize


N_SAMPLES = 50
SEED = 20240601


# -----------------------------------------------------------------------------
# Common Fixtures
# -----------------------------------------------------------------------------

@pytest.fixture
def rng():
    return np.random.default_rng(SEED)


@pytest.fixture
def random_quaternions(rng) -> list[Quaternion]:
    """Arbitrary (non-unit) quaternions."""
    return [from_tuple(rng.normal(size=4)) for _ in range(N_SAMPLES)]


@pytest.fixture
def unit_quaternions(random_quaternions) -> list[Quaternion]:
    """Uniformly distributed unit quaternions."""
    return [normalize(q) for q in random_quaternions]
