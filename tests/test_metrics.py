"""Tests for the +1/-1 metric helpers."""

from __future__ import annotations

import numpy as np
import pytest

from signvote import compute_classification_metrics, summarize_weights
from signvote.metrics import majority_baseline


def test_classification_metrics_use_plus_one_as_positive() -> None:
    m = compute_classification_metrics([1, 1, -1, -1], [1, -1, -1, -1])
    assert m["accuracy"] == pytest.approx(0.75)
    assert m["precision"] == pytest.approx(1.0)
    assert m["recall"] == pytest.approx(0.5)
    assert m["confusion_matrix"].tolist() == [[2, 0], [1, 1]]


def test_majority_baseline() -> None:
    assert majority_baseline([1, 1, -1], [1, -1])["accuracy"] == pytest.approx(0.5)
    # tied training labels predict -1 everywhere
    tied = majority_baseline([1, -1], [-1, -1, 1])
    assert tied["confusion_matrix"].tolist() == [[2, 0], [1, 0]]


def test_summarize_weights() -> None:
    top = summarize_weights(np.array([0.5, -2.0, 3.0, 0.0]), top_k=1)
    assert top["positive"].index.tolist() == ["x2"]
    assert top["negative"].index.tolist() == ["x1"]
