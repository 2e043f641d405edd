import numpy as np
import pytest

from normr import Normal

ATOL = 1e-6
RTOL = 1e-8

@pytest.fixture(scope="session")
def rng():
    return np.random.default_rng(1234)

@pytest.fixture(scope="session")
def z_grid():
    return np.linspace(-8.0, 8.0, 16001)

@pytest.fixture(scope="session")
def standard():
    return Normal()
