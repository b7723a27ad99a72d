import numpy
import pytest


@pytest.fixture
def rng():
    return numpy.random.default_rng(2020)


@pytest.fixture
def tied_rankings(rng):
    a = rng.integers(0, 5, size=40).tolist()
    b = rng.integers(0, 7, size=40).tolist()
    return a, b
