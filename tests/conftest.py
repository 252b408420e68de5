import random

import pytest

from planar_index import Point2D
from planar_index.core import logger


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def grid_points(rng):
    """Points on a coarse grid, so duplicates and shared coordinates occur."""
    return [Point2D(rng.randint(0, 16) / 16.0, rng.randint(0, 16) / 16.0) for _ in range(300)]


@pytest.fixture
def uniform_points(rng):
    return [Point2D(rng.random(), rng.random()) for _ in range(500)]


@pytest.fixture(autouse=True)
def reset_log_level():
    yield
    logger.set_debug(False)
