class KNNError(Exception):
    """Base class for errors raised by the knn package."""


class UnconfiguredModelError(KNNError, ValueError):
    """
    The classifier is missing training data, or a query does not match
    the dimensionality of the stored features.
    """


class InsufficientDataError(KNNError, ValueError):
    """
    The dataset cannot be split into at least one train/validation fold.
    """
