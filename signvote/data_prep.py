from __future__ import annotations

"""
Loading feature matrices and label vectors from plain numeric text files, and
writing predicted labels back out.

Values may be separated by whitespace and/or commas. Every failure is raised
as DataLoadFailure / DataWriteFailure; nothing falls back to an empty matrix.
"""

import io
import logging
from pathlib import Path

import numpy as np
import pandas as pd

from .errors import DataLoadFailure, DataWriteFailure, SignVoteError
from .validation import check_labels, check_matrix

logger = logging.getLogger(__name__)


def _read_text(source: str | Path) -> str:
    path = Path(source)
    if not path.is_file():
        logger.error(f"Data file not found: {path}")
        raise DataLoadFailure(f"Data file not found: {path}")
    try:
        text = path.read_text()
    except (OSError, UnicodeDecodeError) as exc:
        logger.error(f"Error reading {path}: {exc}")
        raise DataLoadFailure(f"Could not read {path}: {exc}") from exc
    text = text.replace(",", " ")
    if not text.strip():
        logger.error(f"Data file is empty: {path}")
        raise DataLoadFailure(f"Data file is empty: {path}")
    return text


def _read_values(source: str | Path) -> np.ndarray:
    """All numbers of a file as one flat stream, in reading order."""
    tokens = pd.Series(_read_text(source).split())
    try:
        values = pd.to_numeric(tokens, errors="raise")
    except ValueError as exc:
        logger.error(f"Non-numeric value in {source}: {exc}")
        raise DataLoadFailure(f"Non-numeric value in {source}: {exc}") from exc
    return values.to_numpy(dtype=float)


def load_matrix(source: str | Path, n_rows: int | None = None) -> np.ndarray:
    """
    Read a feature matrix, one sample per line.

    With ``n_rows`` the file is read as a flat stream of numbers and reshaped
    into that many rows, regardless of line breaks.
    """
    logger.info(f"Loading matrix from {source}")
    if n_rows is not None:
        values = _read_values(source)
        if n_rows <= 0 or values.size % n_rows != 0:
            raise DataLoadFailure(
                f"{source} holds {values.size} values, which cannot be split into {n_rows} rows"
            )
        X = values.reshape(n_rows, -1)
    else:
        text = _read_text(source)
        try:
            table = pd.read_csv(io.StringIO(text), header=None, sep=r"\s+")
        except (pd.errors.ParserError, pd.errors.EmptyDataError) as exc:
            logger.error(f"Error parsing {source}: {exc}")
            raise DataLoadFailure(f"Malformed matrix in {source}: {exc}") from exc

        numeric = table.apply(pd.to_numeric, errors="coerce")
        if (numeric.isna() & table.notna()).any().any():
            raise DataLoadFailure(f"Non-numeric value in {source}")
        if table.isna().any().any():
            raise DataLoadFailure(f"Rows in {source} have inconsistent lengths")
        X = numeric.to_numpy(dtype=float)

    try:
        X = check_matrix(X, name=str(source))
    except SignVoteError as exc:
        raise DataLoadFailure(str(exc)) from exc
    logger.info(f"Matrix loaded: {X.shape[0]} rows, {X.shape[1]} columns")
    return X


def load_labels(source: str | Path) -> np.ndarray:
    """Read a +1/-1 label vector, one value per record."""
    logger.info(f"Loading labels from {source}")
    values = _read_values(source)
    try:
        labels = check_labels(values, name=str(source))
    except SignVoteError as exc:
        logger.error(f"Invalid labels in {source}: {exc}")
        raise DataLoadFailure(str(exc)) from exc
    logger.info(f"Labels loaded: {labels.size} values, positive rate {np.mean(labels == 1):.3f}")
    return labels


def write_labels(destination: str | Path, labels) -> Path:
    """Write one integer label per line."""
    labels = check_labels(labels, name="labels")
    path = Path(destination)
    try:
        pd.Series(labels).to_csv(path, header=False, index=False)
    except OSError as exc:
        logger.error(f"Error writing labels to {path}: {exc}")
        raise DataWriteFailure(f"Could not write labels to {path}: {exc}") from exc
    logger.info(f"Wrote {labels.size} labels to {path}")
    return path


def add_constant_column(X, value: float = 1.0) -> np.ndarray:
    """Append a constant feature so the linear model can learn an offset."""
    X_arr = check_matrix(X)
    return np.hstack([X_arr, np.full((X_arr.shape[0], 1), value)])


def load_dataset(
    train_features: str | Path,
    train_labels: str | Path,
    test_features: str | Path,
):
    """
    Load (X_train, y_train, X_test).

    When the training matrix's row count disagrees with the label count, the
    file is re-read as a flat stream with one row per label, and the test file
    is reshaped to the same number of columns.
    """
    y_train = load_labels(train_labels)
    X_train = load_matrix(train_features)
    if X_train.shape[0] != y_train.size:
        logger.info(
            f"{train_features} has {X_train.shape[0]} rows for {y_train.size} labels; "
            "reading it as a flat stream"
        )
        X_train = load_matrix(train_features, n_rows=y_train.size)

    X_test = load_matrix(test_features)
    n_features = X_train.shape[1]
    if X_test.shape[1] != n_features:
        if X_test.size % n_features != 0:
            raise DataLoadFailure(
                f"{test_features} holds {X_test.size} values, not a multiple of {n_features} features"
            )
        X_test = load_matrix(test_features, n_rows=X_test.size // n_features)
    return X_train, y_train, X_test
