import numpy as np
import pytest


@pytest.fixture
def two_clusters():
    X = np.array([[0.0, 0.0], [0.0, 1.0], [5.0, 5.0], [5.0, 6.0]])
    y = np.array([0, 0, 1, 1])
    return X, y


@pytest.fixture
def line_data():
    X = np.array([[0.0], [1.0], [2.0], [3.0]])
    y = np.array([0.0, 1.0, 2.0, 3.0])
    return X, y
