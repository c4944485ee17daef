from typing import Callable, NamedTuple, Union

import numpy as np

from knn.distances import DISTANCES
from knn.kernels import KERNELS


class Similarity(NamedTuple):
    """
    A pairwise scoring function together with its better-is direction.

    func : callable
        f(X, Y) -> matrix of shape (n_x, n_y)

    maximize : bool
        False for distances (smaller is closer), True for kernels.
    """
    func: Callable
    maximize: bool

    def score(self, X: np.ndarray, Y: np.ndarray) -> np.ndarray:
        return self.func(X, Y)

    def rank(self, scores: np.ndarray) -> np.ndarray:
        # stable sort: equal scores keep the lower training index first
        keys = -scores if self.maximize else scores
        return np.argsort(keys, axis=-1, kind='stable')

    def best(self, scores: np.ndarray) -> np.ndarray:
        # argmin / argmax return the first optimum, same as rank(...)[..., 0]
        if self.maximize:
            return np.argmax(scores, axis=-1)
        return np.argmin(scores, axis=-1)


def Distance(func: Callable) -> Similarity:
    return Similarity(func, maximize=False)


def Kernel(func: Callable) -> Similarity:
    return Similarity(func, maximize=True)


def get_distance(metric: Union[str, Callable]) -> Similarity:
    if callable(metric):
        return Distance(metric)
    if metric not in DISTANCES:
        raise TypeError("Metric <{}> is not supported!".format(metric))
    return Distance(DISTANCES[metric])


def get_kernel(kernel: Union[str, Callable]) -> Similarity:
    if callable(kernel):
        return Kernel(kernel)
    if kernel not in KERNELS:
        raise TypeError("Kernel <{}> is not supported!".format(kernel))
    return Kernel(KERNELS[kernel])
