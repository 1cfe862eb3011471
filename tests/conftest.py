import matplotlib

matplotlib.use("Agg")

import pytest


@pytest.fixture
def sample_bursts():
    return [5, 8, 2]
