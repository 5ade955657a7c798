from __future__ import annotations

"""
k-nearest-neighbours for +1/-1 labels: Euclidean distance, stable neighbour
selection and a sign-of-sum vote.
"""

import logging

import numpy as np
import pandas as pd
from joblib import Parallel, delayed

from .constants import DEFAULT_K, NEGATIVE_LABEL, POSITIVE_LABEL
from .errors import DimensionMismatch
from .validation import check_labels, check_matrix, check_n_jobs, check_positive_int, check_vector

logger = logging.getLogger(__name__)


def euclidean_distances(query, references) -> pd.Series:
    """
    Distance from ``query`` to every reference row.

    The result is indexed by reference row number, in reference order.
    """
    refs = check_matrix(references, name="references")
    q = check_vector(query, name="query")
    if q.shape[0] != refs.shape[1]:
        raise DimensionMismatch(
            f"query has {q.shape[0]} features but references have {refs.shape[1]}"
        )
    dists = np.sqrt(np.sum((refs - q) ** 2, axis=1))
    return pd.Series(dists, index=pd.RangeIndex(len(dists), name="reference"), name="distance")


def nearest_neighbors(distances: pd.Series, k: int) -> pd.Series:
    """
    The k smallest entries of a distance list, ordered by (distance, index).

    Equal distances always resolve to the lower reference index.
    """
    order = np.lexsort((distances.index.to_numpy(), distances.to_numpy()))
    return distances.iloc[order[:k]]


def majority_vote(labels) -> int:
    """+1 if the labels sum to a strictly positive value, otherwise -1 (ties included)."""
    return POSITIVE_LABEL if int(np.sum(labels)) > 0 else NEGATIVE_LABEL


def _classify_row(row: np.ndarray, X_train: np.ndarray, y_train: np.ndarray, k: int) -> int:
    neighbors = nearest_neighbors(euclidean_distances(row, X_train), k)
    return majority_vote(y_train[neighbors.index.to_numpy()])


def _check_knn_inputs(X_train, y_train, X_test, k, n_jobs=None):
    X_train = check_matrix(X_train, name="X_train")
    y_train = check_labels(y_train, n_rows=X_train.shape[0], name="y_train")
    X_test = check_matrix(X_test, name="X_test")
    if X_test.shape[1] != X_train.shape[1]:
        raise DimensionMismatch(
            f"X_test has {X_test.shape[1]} columns but X_train has {X_train.shape[1]}"
        )
    k = check_positive_int(k, "k", upper=X_train.shape[0])
    n_jobs = check_n_jobs(n_jobs)
    return X_train, y_train, X_test, k, n_jobs


def classify(X_train, y_train, X_test, k: int = DEFAULT_K, n_jobs: int | None = None) -> np.ndarray:
    """
    Predict a +1/-1 label for every row of X_test from its k nearest training rows.

    ``n_jobs`` fans test rows out over joblib threads; results keep test-row order
    and are identical to the sequential path.
    """
    X_train, y_train, X_test, k, n_jobs = _check_knn_inputs(X_train, y_train, X_test, k, n_jobs)

    if n_jobs is None or n_jobs == 1:
        preds = [_classify_row(row, X_train, y_train, k) for row in X_test]
    else:
        logger.debug(f"Classifying {len(X_test)} rows with n_jobs={n_jobs}")
        preds = Parallel(n_jobs=n_jobs, prefer="threads")(
            delayed(_classify_row)(row, X_train, y_train, k) for row in X_test
        )
    return np.asarray(preds, dtype=int)


class KNNClassifier:
    """Reference-set classifier; fit only stores (and validates) the training data."""

    def __init__(self, k: int = DEFAULT_K, n_jobs: int | None = None):
        self.k = k
        self.n_jobs = n_jobs
        self.X_: np.ndarray | None = None
        self.y_: np.ndarray | None = None

    def fit(self, X, y):
        X_arr = check_matrix(X, name="X_train")
        self.y_ = check_labels(y, n_rows=X_arr.shape[0], name="y_train")
        check_positive_int(self.k, "k", upper=X_arr.shape[0])
        check_n_jobs(self.n_jobs)
        self.X_ = X_arr
        return self

    def _check_fitted(self):
        if self.X_ is None:
            raise RuntimeError("Model is not fitted.")

    def predict(self, X) -> np.ndarray:
        self._check_fitted()
        return classify(self.X_, self.y_, X, k=self.k, n_jobs=self.n_jobs)

    def kneighbors(self, X) -> tuple[np.ndarray, np.ndarray]:
        """Distances and reference indices of the k nearest rows, one row per query."""
        self._check_fitted()
        X_arr, _, X_test, k, _ = _check_knn_inputs(self.X_, self.y_, X, self.k)
        dists, idxs = [], []
        for row in X_test:
            neighbors = nearest_neighbors(euclidean_distances(row, X_arr), k)
            dists.append(neighbors.to_numpy())
            idxs.append(neighbors.index.to_numpy())
        return np.vstack(dists), np.vstack(idxs)
