import logging
from collections import defaultdict

import numpy as np
from sklearn.base import clone

from knn.exceptions import InsufficientDataError
from knn.metrics import RegressionMeasure, regression_measure
from knn.nearest_neighbors import KNNClassifier

logger = logging.getLogger(__name__)


def kfold(n, n_folds):
    index = np.arange(n)
    folds = np.array_split(index, n_folds)

    result = []
    for fold in folds:
        mask = np.ones(n).astype(bool)
        mask[fold] = False
        result.append((index[mask], index[~mask]))

    return result


def leave_one_out(n):
    # fold i holds out exactly object i
    return kfold(n, n)


def _fresh_model(model):
    # a class or a zero-argument factory builds the model itself
    if isinstance(model, type) or (callable(model) and not hasattr(model, 'fit')):
        return model()
    return clone(model, safe=False)


def leave_one_out_predict(model, X, y):
    """
    Predictions for every object made by a model trained on all the others.

    model : estimator with fit(X, y) and predict(X), or a factory returning one
        Every fold trains its own copy, the passed model is never fitted.

    X : numpy ndarray
        Array of size n_objects, n_features

    y : numpy ndarray
        Array of size n_objects

    Returns
    -------
    predictions : numpy ndarray
        Array of size n_objects, predictions[i] comes from the fold holding out i
    """
    X = np.asarray(X)
    y = np.asarray(y)

    if X.shape[0] != y.shape[0]:
        raise InsufficientDataError(
            "Got {} inputs but {} targets".format(X.shape[0], y.shape[0]))
    n = X.shape[0]
    if n < 2:
        raise InsufficientDataError(
            "Leave-one-out needs at least 2 objects, got {}".format(n))

    predictions = np.empty(n, dtype=float)
    for i, (train_ind, val_ind) in enumerate(leave_one_out(n)):
        fold_model = _fresh_model(model)
        fold_model.fit(X[train_ind], y[train_ind])
        predictions[val_ind] = np.ravel(fold_model.predict(X[val_ind]))
        logger.debug("Fold %d/%d: target %s, predicted %s", i + 1, n, y[i], predictions[i])

    return predictions


class LeaveOneOutCrossValidation:
    """
    Leave one object out for validation and train on the rest, once per object.
    """

    def run(self, model, X, y) -> RegressionMeasure:
        predictions = leave_one_out_predict(model, X, y)
        measure = regression_measure(y, predictions)
        logger.info("Leave-one-out over %d objects: MAE=%.6g MSE=%.6g RMSE=%.6g R2=%.6g",
                    len(predictions), *measure)
        return measure


def knn_cross_val_score(X: np.ndarray, y: np.ndarray, k_list, score: str = 'accuracy', cv=None, **kwargs):
    if score == 'accuracy':
        score_func = lambda y_pred, y_true: np.mean(y_pred == y_true)
    elif score == 'error':
        score_func = lambda y_pred, y_true: np.mean(y_pred != y_true)
    else:
        raise TypeError("Score <{}> is not supported!\nUse <accuracy> or <error>.".format(score))

    # KFold splits
    if not cv:
        cv = kfold(X.shape[0], n_folds=3)

    # one neighbour search with the largest k serves every k
    kwargs['k'] = max(k_list)

    scoring = defaultdict(list)
    for train_ind, val_ind in cv:
        model = KNNClassifier(**kwargs)
        model.fit(X[train_ind], y[train_ind])
        indices = model.find_kneighbors(X[val_ind], False)
        for k in k_list:
            predictions = model.estimate(indices[:, :k])
            scoring[k].append(score_func(predictions, y[val_ind]))

    return scoring
