"""Global configuration for pytest"""

import numpy as np
import pytest


@pytest.fixture(autouse=True)
def predictable_random_numbers():
    """
    Called at start of each test, so the random matrices generated with numpy
    are the same on every test run.
    """
    np.random.seed(0)


@pytest.fixture(autouse=True, scope="session")
def numerical_exceptions():
    """
    Make numpy raise on numerical errors (overflow, invalid values) instead of
    warning, so reference computations in the tests cannot silently go wrong.
    """
    np.seterr(all="raise")
