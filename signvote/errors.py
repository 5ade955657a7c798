from __future__ import annotations

"""
Exceptions raised by the classifiers and their data collaborators.
"""

import numpy as np


class SignVoteError(Exception):
    """Base class for every failure raised by this package."""


class DataLoadFailure(SignVoteError):
    """A matrix or label file is missing, malformed, or has ragged rows."""


class DataWriteFailure(SignVoteError):
    """Predicted labels could not be written to the destination."""


class DimensionMismatch(SignVoteError, ValueError):
    """Paired matrices/vectors disagree on their shapes."""


class InvalidParameter(SignVoteError, ValueError):
    """A hyperparameter or label value lies outside its valid domain."""


class NonConvergence(SignVoteError):
    """
    Gradient descent hit the iteration cap before the update norm dropped
    below the tolerance. The best-so-far weights travel with the exception.
    """

    def __init__(self, weights: np.ndarray, n_iter: int, last_update: float, tolerance: float):
        self.weights = weights
        self.n_iter = n_iter
        self.last_update = last_update
        self.tolerance = tolerance
        super().__init__(
            f"Gradient descent did not converge after {n_iter} steps "
            f"(last update norm {last_update:.3e} >= tolerance {tolerance:.1e})"
        )
