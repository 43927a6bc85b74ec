"""Shared test fixtures for support reduction tests."""
from fractions import Fraction

import numpy as np
import pytest

from caratheodory.pointset import make_point_set, uniform_point_set


@pytest.fixture
def line_set():
    """D=1: points 0, 1, 2 with weights 1/4, 1/4, 1/2 (target 1.25)."""
    return make_point_set([(0.0,), (1.0,), (2.0,)], [0.25, 0.25, 0.5])


@pytest.fixture
def line_set_exact():
    return make_point_set([(0,), (1,), (2,)], [Fraction(1, 4), Fraction(1, 4), Fraction(1, 2)])


@pytest.fixture
def square_set():
    """D=2: three corners plus the midpoint (1,1), equal weights (target (0.75, 0.75))."""
    return uniform_point_set({"A": (0.0, 0.0), "B": (2.0, 0.0), "C": (0.0, 2.0), "D": (1.0, 1.0)})


@pytest.fixture
def square_set_exact():
    return uniform_point_set({"A": (0, 0), "B": (2, 0), "C": (0, 2), "D": (1, 1)})


@pytest.fixture
def triangle_set():
    """Already affinely independent."""
    return make_point_set({"A": (0.0, 0.0), "B": (2.0, 0.0), "C": (0.0, 2.0)}, {"A": 0.5, "B": 0.25, "C": 0.25})


@pytest.fixture
def collinear_exact():
    """Five points on the diagonal of the plane, equal weights (target (2, 2))."""
    return uniform_point_set([(i, i) for i in range(5)])


@pytest.fixture(scope="session")
def random_clouds():
    """Eight general-position clouds: (point_set, n, dim)."""
    rng = np.random.default_rng(7)
    clouds = []
    for n, dim in [(6, 1), (8, 2), (10, 2), (10, 3), (12, 3), (15, 4), (9, 5), (20, 6)]:
        pts = rng.random((n, dim))
        w = rng.dirichlet(np.ones(n))
        clouds.append((make_point_set(pts.tolist(), w.tolist()), n, dim))
    return clouds
