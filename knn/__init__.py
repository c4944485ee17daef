from .nearest_neighbors import KNNClassifier, NO_LABEL
from .cross_validation import LeaveOneOutCrossValidation
from .metrics import RegressionMeasure
from .exceptions import KNNError, UnconfiguredModelError, InsufficientDataError
from . import distances
from . import kernels
from . import cross_validation

__all__ = [
    'KNNClassifier',
    'NO_LABEL',
    'LeaveOneOutCrossValidation',
    'RegressionMeasure',
    'KNNError',
    'UnconfiguredModelError',
    'InsufficientDataError',
    'distances',
    'kernels',
    'cross_validation',
]
