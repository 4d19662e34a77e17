import numpy as np
import pytest

from geometry.naca.profile import generate


@pytest.fixture
def unit_square():
    return np.array([[0.0, 0.0], [1.0, 0.0], [1.0, 1.0], [0.0, 1.0]])


@pytest.fixture
def naca0012():
    return generate(12, station_count=50)


@pytest.fixture
def naca2412():
    return generate(2412, station_count=60)
