from __future__ import annotations

"""
Metric helpers for +1/-1 predictions (classification summaries and weight dumps).
"""

import numpy as np
import pandas as pd
from sklearn import metrics

from .constants import NEGATIVE_LABEL, POSITIVE_LABEL
from .validation import check_labels


def compute_classification_metrics(y_true, y_pred) -> dict:
    """Standard binary metrics with +1 as the positive class."""
    y_true = check_labels(y_true, name="y_true")
    y_pred = check_labels(y_pred, n_rows=y_true.size, name="y_pred")
    precision, recall, f1, _ = metrics.precision_recall_fscore_support(
        y_true, y_pred, average="binary", pos_label=POSITIVE_LABEL, zero_division=0
    )
    return {
        "accuracy": metrics.accuracy_score(y_true, y_pred),
        "precision": precision,
        "recall": recall,
        "f1": f1,
        "confusion_matrix": metrics.confusion_matrix(
            y_true, y_pred, labels=[NEGATIVE_LABEL, POSITIVE_LABEL]
        ),
    }


def majority_baseline(y_train, y_test) -> dict:
    """
    Predicts the majority training label for every test row (ties go to -1,
    same as the kNN vote).
    """
    y_train = check_labels(y_train, name="y_train")
    majority = POSITIVE_LABEL if y_train.sum() > 0 else NEGATIVE_LABEL
    y_test = check_labels(y_test, name="y_test")
    return compute_classification_metrics(y_test, np.full_like(y_test, majority))


def summarize_weights(
    weights: np.ndarray, feature_names: list[str] | None = None, top_k: int = 8
) -> dict[str, pd.Series]:
    if feature_names is None:
        feature_names = [f"x{j}" for j in range(len(weights))]
    weight_series = pd.Series(np.asarray(weights, dtype=float), index=feature_names)
    weight_sorted = weight_series.sort_values()
    return {
        "positive": weight_sorted[weight_sorted > 0].tail(top_k)[::-1],
        "negative": weight_sorted[weight_sorted < 0].head(top_k),
    }
