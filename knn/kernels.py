"""
Pairwise kernels. Every function takes X of shape (n_x, n_features) and
Y of shape (n_y, n_features) and returns an (n_x, n_y) matrix where a larger
value means the two rows are more alike.
"""
import numpy as np

from knn.distances import euclidean_distance


def linear_kernel(X, Y):
    return np.dot(X, Y.T)


def gaussian_kernel(X, Y, sigma=1.0):
    """
    exp(-||x - y||^2 / (2 * sigma^2))
    """
    if sigma <= 0:
        raise ValueError("sigma must be positive, got {}".format(sigma))
    sq_dist = euclidean_distance(X, Y) ** 2
    return np.exp(-sq_dist / (2.0 * sigma ** 2))


def polynomial_kernel(X, Y, degree=2, coef0=1.0):
    return (np.dot(X, Y.T) + coef0) ** degree


KERNELS = {
    'linear': linear_kernel,
    'gaussian': gaussian_kernel,
    'polynomial': polynomial_kernel,
}
