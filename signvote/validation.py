from __future__ import annotations

"""
Shape and value checks shared by both classifiers. Every check fails fast,
before any computation starts.
"""

import numbers

import numpy as np

from .constants import VALID_LABELS
from .errors import DimensionMismatch, InvalidParameter


def check_matrix(X, name: str = "X") -> np.ndarray:
    """Return X as a finite 2-D float array with at least one row and column."""
    try:
        X_arr = np.asarray(X, dtype=float)
    except ValueError as exc:
        raise DimensionMismatch(f"{name} must be a rectangular numeric matrix: {exc}") from exc
    if X_arr.ndim != 2:
        raise DimensionMismatch(f"{name} must be 2-D (rows x features), got shape {X_arr.shape}")
    if X_arr.shape[0] < 1 or X_arr.shape[1] < 1:
        raise DimensionMismatch(f"{name} needs at least one row and one column, got shape {X_arr.shape}")
    if not np.all(np.isfinite(X_arr)):
        raise InvalidParameter(f"{name} contains NaN or infinite values")
    return X_arr


def check_vector(v, name: str = "vector") -> np.ndarray:
    try:
        v_arr = np.asarray(v, dtype=float)
    except ValueError as exc:
        raise DimensionMismatch(f"{name} must be a flat numeric vector: {exc}") from exc
    if v_arr.ndim == 2 and 1 in v_arr.shape:
        v_arr = v_arr.ravel()
    if v_arr.ndim != 1:
        raise DimensionMismatch(f"{name} must be 1-D, got shape {v_arr.shape}")
    if not np.all(np.isfinite(v_arr)):
        raise InvalidParameter(f"{name} contains NaN or infinite values")
    return v_arr


def check_labels(y, n_rows: int | None = None, name: str = "y") -> np.ndarray:
    """Return y as a 1-D int array of +1/-1, optionally checking its length."""
    y_arr = np.asarray(y)
    if y_arr.ndim == 2 and 1 in y_arr.shape:
        y_arr = y_arr.ravel()
    if y_arr.ndim != 1:
        raise DimensionMismatch(f"{name} must be 1-D, got shape {y_arr.shape}")
    if y_arr.size < 1:
        raise DimensionMismatch(f"{name} is empty")
    if n_rows is not None and y_arr.shape[0] != n_rows:
        raise DimensionMismatch(f"{name} has {y_arr.shape[0]} labels but the matrix has {n_rows} rows")
    if y_arr.dtype == bool:
        raise InvalidParameter(f"{name} must contain -1/+1, not booleans")
    bad = ~np.isin(y_arr, VALID_LABELS)
    if bad.any():
        raise InvalidParameter(
            f"{name} must only contain -1/+1, found {np.unique(y_arr[bad]).tolist()}"
        )
    return y_arr.astype(int)


def check_positive(value, name: str) -> float:
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise InvalidParameter(f"{name} must be a real number, got {value!r}")
    if not np.isfinite(value) or value <= 0:
        raise InvalidParameter(f"{name} must be positive and finite, got {value}")
    return float(value)


def check_positive_int(value, name: str, upper: int | None = None) -> int:
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise InvalidParameter(f"{name} must be an integer, got {value!r}")
    if value <= 0:
        raise InvalidParameter(f"{name} must be positive, got {value}")
    if upper is not None and value > upper:
        raise InvalidParameter(f"{name}={value} exceeds the allowed maximum {upper}")
    return int(value)


def check_n_jobs(value, name: str = "n_jobs") -> int | None:
    """None or a non-zero integer (negative values count back from all CPUs, as in joblib)."""
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, numbers.Integral) or value == 0:
        raise InvalidParameter(f"{name} must be a non-zero integer or None, got {value!r}")
    return int(value)
