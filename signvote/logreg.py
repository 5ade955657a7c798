from __future__ import annotations

"""
Logistic regression for +1/-1 labels trained with plain batch gradient descent.

There is no intercept and no regularization: w starts at zero and moves along
the averaged logistic-loss gradient until the largest component of the step
falls below the tolerance. Append a constant column to X upstream if the data
is not centered (see data_prep.add_constant_column).
"""

import logging

import numpy as np

from .constants import (
    DEFAULT_ALPHA,
    DEFAULT_MAX_ITER,
    DEFAULT_TOLERANCE,
    LOG_EVERY,
    NEGATIVE_LABEL,
    POSITIVE_LABEL,
)
from .errors import DimensionMismatch, NonConvergence
from .validation import (
    check_labels,
    check_matrix,
    check_positive,
    check_positive_int,
    check_vector,
)

logger = logging.getLogger(__name__)


def _sigmoid(z: np.ndarray) -> np.ndarray:
    z = np.clip(z, -500, 500)
    return 1.0 / (1.0 + np.exp(-z))


def _frozen(weights: np.ndarray) -> np.ndarray:
    weights = np.array(weights, dtype=float)
    weights.flags.writeable = False
    return weights


def fit_weights(
    X,
    y,
    alpha: float = DEFAULT_ALPHA,
    tolerance: float = DEFAULT_TOLERANCE,
    max_iter: int = DEFAULT_MAX_ITER,
    history: list[float] | None = None,
) -> np.ndarray:
    """
    Fit a weight vector by batch gradient descent on the logistic loss.

    Each step computes the averaged gradient
    G = mean_i(-y_i * x_i / (1 + exp(y_i * w.x_i))), applies
    update = alpha * G and stops once max|update| < tolerance.

    If ``history`` is given, the infinity norm of every update is appended to it.
    Raises NonConvergence (carrying the best-so-far weights) after ``max_iter``
    steps without convergence.
    """
    X_arr = check_matrix(X)
    y_arr = check_labels(y, n_rows=X_arr.shape[0]).astype(float)
    alpha = check_positive(alpha, "alpha")
    tolerance = check_positive(tolerance, "tolerance")
    max_iter = check_positive_int(max_iter, "max_iter")

    n_samples, n_features = X_arr.shape
    weights = np.zeros(n_features)
    signed_rows = y_arr[:, None] * X_arr
    last_update = float("inf")

    for step in range(1, max_iter + 1):
        margins = signed_rows @ weights
        # sigmoid(-m) == 1 / (1 + exp(m)); the clip keeps exp finite for huge margins
        grad = -(signed_rows.T @ _sigmoid(-margins)) / n_samples
        update = alpha * grad
        weights = weights - update
        last_update = float(np.max(np.abs(update)))

        if history is not None:
            history.append(last_update)

        if last_update < tolerance:
            logger.info(f"Gradient descent converged after {step} steps (update norm {last_update:.3e})")
            return _frozen(weights)

        if step % LOG_EVERY == 0:
            logger.debug(f"[GD] step={step}, update_norm={last_update:.3e}")

    logger.warning(f"Gradient descent stopped at the cap of {max_iter} steps (update norm {last_update:.3e})")
    raise NonConvergence(_frozen(weights), max_iter, last_update, tolerance)


def decision_scores(X, weights) -> np.ndarray:
    """Linear scores X @ w after checking that the shapes line up."""
    X_arr = check_matrix(X)
    w_arr = check_vector(weights, name="weights")
    if X_arr.shape[1] != w_arr.shape[0]:
        raise DimensionMismatch(
            f"X has {X_arr.shape[1]} columns but the weight vector has {w_arr.shape[0]} entries"
        )
    return X_arr @ w_arr


def predict_labels(X, weights) -> np.ndarray:
    """+1 where X @ w >= 0, -1 elsewhere."""
    scores = decision_scores(X, weights)
    return np.where(scores >= 0, POSITIVE_LABEL, NEGATIVE_LABEL).astype(int)


class LogisticRegressionGD:
    """
    Estimator wrapper around fit_weights/predict_labels.

    With allow_nonconvergence=True, hitting the iteration cap keeps the
    best-so-far weights and sets converged_ to False instead of raising.
    """

    def __init__(
        self,
        alpha: float = DEFAULT_ALPHA,
        tolerance: float = DEFAULT_TOLERANCE,
        max_iter: int = DEFAULT_MAX_ITER,
        allow_nonconvergence: bool = False,
    ):
        self.alpha = alpha
        self.tolerance = tolerance
        self.max_iter = max_iter
        self.allow_nonconvergence = allow_nonconvergence
        self.coef_: np.ndarray | None = None
        self.update_norms_: list[float] = []
        self.n_iter_: int = 0
        self.converged_: bool = False

    def fit(self, X, y):
        """Train the model with batch gradient descent."""
        self.coef_ = None
        self.converged_ = False
        self.update_norms_ = []
        self.n_iter_ = 0

        history: list[float] = []
        try:
            self.coef_ = fit_weights(
                X,
                y,
                alpha=self.alpha,
                tolerance=self.tolerance,
                max_iter=self.max_iter,
                history=history,
            )
            self.converged_ = True
        except NonConvergence as exc:
            if not self.allow_nonconvergence:
                raise
            self.coef_ = exc.weights
        finally:
            self.update_norms_ = history
            self.n_iter_ = len(history)
        return self

    def _check_fitted(self):
        if self.coef_ is None:
            raise RuntimeError("Model is not fitted.")

    def decision_function(self, X) -> np.ndarray:
        self._check_fitted()
        return decision_scores(X, self.coef_)

    def predict_proba(self, X) -> np.ndarray:
        """Return P(y=+1) for each row in X."""
        return _sigmoid(self.decision_function(X))

    def predict(self, X) -> np.ndarray:
        """Sign predictions in {-1, +1}."""
        self._check_fitted()
        return predict_labels(X, self.coef_)
