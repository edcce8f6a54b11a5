import numpy as np
import pytest


# This is run automatically before *every* test (autouse=True)
@pytest.fixture(scope="function", autouse=True)
def reset_random_seed():

    # Reset the random seed so the results of the tests using
    # random numbers are actually predictable
    np.random.seed(1234)

    # Suppress numpy warnings
    np.seterr(over="ignore", under="ignore", divide="ignore", invalid="ignore")


@pytest.fixture(scope="session")
def large_arguments():

    # widely spaced arguments up to 2**62, always past the table
    return np.unique(np.geomspace(126, 2 ** 62, 300).astype(np.int64))
