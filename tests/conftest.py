from datetime import datetime

import numpy as np
import pytest


@pytest.fixture
def rng():
    return np.random.default_rng(1234)


@pytest.fixture
def now():
    return datetime(2024, 6, 15, 12, 0, 0)
