from typing import NamedTuple

import numpy as np
from sklearn.metrics import mean_absolute_error, mean_squared_error, r2_score


class RegressionMeasure(NamedTuple):
    mean_absolute_error: float
    mean_squared_error: float
    root_mean_squared_error: float
    coefficient_of_determination: float


def regression_measure(y_true, y_pred) -> RegressionMeasure:
    """
    y_true : numpy ndarray
        Array of size n_objects

    y_pred : numpy ndarray
        Array of size n_objects
    """
    mse = mean_squared_error(y_true, y_pred)
    return RegressionMeasure(
        mean_absolute_error=float(mean_absolute_error(y_true, y_pred)),
        mean_squared_error=float(mse),
        root_mean_squared_error=float(np.sqrt(mse)),
        coefficient_of_determination=float(r2_score(y_true, y_pred)),
    )
