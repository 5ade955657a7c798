from __future__ import annotations

"""
The shared "binary classifier" capability: given feature rows, produce a +1/-1
label per row. LogisticRegressionGD (trainable) and KNNClassifier
(reference-set based) both satisfy it.
"""

from typing import Protocol, runtime_checkable

import numpy as np


@runtime_checkable
class BinaryClassifier(Protocol):
    def fit(self, X, y) -> "BinaryClassifier":
        ...

    def predict(self, X) -> np.ndarray:
        ...
