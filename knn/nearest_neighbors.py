import logging
from collections import Counter

import numpy as np

from knn.exceptions import UnconfiguredModelError
from knn.similarity import get_distance, get_kernel

logger = logging.getLogger(__name__)

# returned when a vote has no winner; callers treat it as "no label"
NO_LABEL = -1


def vote(labels):
    """
    Majority vote over neighbour labels given best neighbour first.

    Labels are counted in the order they are met, and the first label
    reaching the maximum count wins. A tie therefore goes to the label whose
    first vote came from the nearer neighbour.
    """
    counts = Counter(labels)
    if not counts:
        logger.warning("Vote over an empty neighbourhood, returning %s", NO_LABEL)
        return NO_LABEL

    max_count = max(counts.values())
    for label, count in counts.items():
        if count == max_count:
            return label

    return NO_LABEL


class KNNClassifier:
    def __init__(self, k: int = 3, metric='euclidean', kernel=None):
        """
        k : int
            The number of neighbours taking part in the vote. Values below 1
            are raised to 1.

        metric : str or callable
            Distance used when no kernel is set: 'euclidean', 'cosine',
            'manhattan' or f(X, Y) -> distance matrix.

        kernel : str or callable
            If given, neighbours are ranked by this kernel instead of the
            distance: 'linear', 'gaussian', 'polynomial' or
            f(X, Y) -> score matrix.
        """
        self.set_k(k)

        self.similarity = None
        self.set_distance(metric)
        if kernel is not None:
            self.set_kernel(kernel)

        self.X_train = None
        self.y_train = None
        self.labels = None

    def set_k(self, k: int):
        if k < 1:
            logger.warning("k=%s is below 1, using k=1", k)
        self.k = max(1, int(k))

    def set_distance(self, metric):
        self.similarity = get_distance(metric)
        logger.debug("Ranking neighbours by distance %r", metric)

    def set_kernel(self, kernel):
        self.similarity = get_kernel(kernel)
        logger.debug("Ranking neighbours by kernel %r", kernel)

    @property
    def use_kernel(self) -> bool:
        return self.similarity.maximize

    def fit(self, X: np.ndarray, y: np.ndarray):
        X = np.asarray(X, dtype=float)
        y = np.asarray(y)

        if X.ndim != 2 or X.shape[0] == 0:
            raise UnconfiguredModelError(
                "Training features must be a non-empty 2-D array, got shape {}".format(X.shape))
        if y.shape[0] != X.shape[0]:
            raise UnconfiguredModelError(
                "Got {} feature vectors but {} labels".format(X.shape[0], y.shape[0]))

        self.X_train = X
        self.y_train = y
        self.labels = np.unique(y)
        return self

    def _check_query(self, X) -> np.ndarray:
        if self.X_train is None or self.y_train is None:
            raise UnconfiguredModelError("KNNClassifier is used before fit()")

        X = np.asarray(X, dtype=float)
        if X.ndim != 2 or X.shape[1] != self.X_train.shape[1]:
            raise UnconfiguredModelError(
                "Query of shape {} does not match {} training features".format(
                    X.shape, self.X_train.shape[1]))
        return X

    def _n_neighbors(self) -> int:
        n_train = self.X_train.shape[0]
        if self.k > n_train:
            logger.warning("k=%d exceeds the %d training objects, voting with all of them",
                           self.k, n_train)
            return n_train
        return self.k

    def find_kneighbors(self, X: np.ndarray, return_distance: bool = True):
        """
        Scores and indices of the k best training objects for every row of X,
        best first. Scores are distances or kernel values depending on the
        active similarity.
        """
        X = self._check_query(X)
        scores = self.similarity.score(X, self.X_train)
        indices = self.similarity.rank(scores)[:, :self._n_neighbors()]

        if return_distance:
            return np.take_along_axis(scores, indices, axis=1), indices
        else:
            return indices

    def estimate(self, indices: np.ndarray):
        # partial predictions without re-evaluating find_kneighbors()
        return np.array([vote(self.y_train[row]) for row in indices])

    def predict(self, X: np.ndarray):
        X = self._check_query(X)

        # the single best object needs no ranking
        if self.k == 1:
            scores = self.similarity.score(X, self.X_train)
            return self.y_train[self.similarity.best(scores)]

        indices = self.find_kneighbors(X, False)
        return self.estimate(indices)

    def predict_one(self, feature):
        """
        Label of a single feature vector, or NO_LABEL if the vote has no winner.
        """
        feature = np.asarray(feature, dtype=float)
        if feature.ndim != 1:
            raise UnconfiguredModelError(
                "predict_one() expects a single feature vector, got shape {}".format(feature.shape))
        return self.predict(feature[None, :])[0]
