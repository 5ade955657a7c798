"""
Two binary classifiers for +1/-1 labels: logistic regression trained by batch
gradient descent and k-nearest-neighbours with a majority vote.

This package contains the models, data loading/writing helpers and the
evaluation utilities used by main.py.
"""

from .base import BinaryClassifier
from .config import ClassifierConfig, build_classifier
from .data_prep import add_constant_column, load_dataset, load_labels, load_matrix, write_labels
from .errors import (
    DataLoadFailure,
    DataWriteFailure,
    DimensionMismatch,
    InvalidParameter,
    NonConvergence,
    SignVoteError,
)
from .knn import KNNClassifier, classify, euclidean_distances
from .logreg import LogisticRegressionGD, fit_weights, predict_labels
from .metrics import compute_classification_metrics, summarize_weights

__all__ = [
    "BinaryClassifier",
    "ClassifierConfig",
    "build_classifier",
    "add_constant_column",
    "load_dataset",
    "load_labels",
    "load_matrix",
    "write_labels",
    "DataLoadFailure",
    "DataWriteFailure",
    "DimensionMismatch",
    "InvalidParameter",
    "NonConvergence",
    "SignVoteError",
    "KNNClassifier",
    "classify",
    "euclidean_distances",
    "LogisticRegressionGD",
    "fit_weights",
    "predict_labels",
    "compute_classification_metrics",
    "summarize_weights",
]
