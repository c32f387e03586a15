import matplotlib
import numpy as np
import pytest

matplotlib.use('Agg')


@pytest.fixture
def rng():
    return np.random.default_rng(1234)


@pytest.fixture
def all_messages():
    return range(2048)
