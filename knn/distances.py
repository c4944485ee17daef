import numpy as np


def euclidean_distance(X, Y):
    X_norm = np.sum(X * X, axis=1)[:, None]
    Y_norm = np.sum(Y * Y, axis=1)[None, :]
    # round-off can push identical rows slightly below zero
    return np.sqrt(np.maximum(X_norm + Y_norm - 2 * np.dot(X, Y.T), 0.0))


def cosine_distance(X, Y):
    X_norm = np.sum(X * X, axis=1)[:, None]
    Y_norm = np.sum(Y * Y, axis=1)[None, :]

    X_norm[X_norm == 0] = 1e-5
    Y_norm[Y_norm == 0] = 1e-5
    return 1.0 - np.dot(X, Y.T) / np.sqrt((X_norm * Y_norm))


def manhattan_distance(X, Y):
    return np.sum(np.abs(X[:, None, :] - Y[None, :, :]), axis=2)


DISTANCES = {
    'euclidean': euclidean_distance,
    'cosine': cosine_distance,
    'manhattan': manhattan_distance,
}
