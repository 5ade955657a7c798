"""Tests for the matrix/label loaders and the label writer."""

from __future__ import annotations

from pathlib import Path

import numpy as np
import pytest

from signvote import (
    DataLoadFailure,
    DataWriteFailure,
    add_constant_column,
    load_dataset,
    load_labels,
    load_matrix,
    write_labels,
)


def write(path: Path, text: str) -> Path:
    path.write_text(text)
    return path


def test_load_matrix_whitespace(tmp_path: Path) -> None:
    src = write(tmp_path / "x.dat", "   1.0000e+00   2.0000e+00\n   3.0000e+00   4.0000e+00\n")
    np.testing.assert_array_equal(load_matrix(src), [[1.0, 2.0], [3.0, 4.0]])


def test_load_matrix_commas_and_blank_lines(tmp_path: Path) -> None:
    src = write(tmp_path / "x.csv", "1,2,3\n\n4,5,6\n")
    X = load_matrix(src)
    assert X.shape == (2, 3)
    assert X.dtype == float


@pytest.mark.parametrize("text", ["1 2\n3\n", "1\n2 3\n", "1 a\n2 3\n", "1 inf\n2 3\n", "", "  \n\n"])
def test_load_matrix_rejects_bad_files(tmp_path: Path, text: str) -> None:
    src = write(tmp_path / "bad.dat", text)
    with pytest.raises(DataLoadFailure):
        load_matrix(src)


def test_load_matrix_missing_file(tmp_path: Path) -> None:
    with pytest.raises(DataLoadFailure):
        load_matrix(tmp_path / "nope.dat")


def test_load_matrix_flat_stream(tmp_path: Path) -> None:
    src = write(tmp_path / "x.dat", "1 2 3\n4 5 6\n")
    np.testing.assert_array_equal(load_matrix(src, n_rows=3), [[1, 2], [3, 4], [5, 6]])
    with pytest.raises(DataLoadFailure):
        load_matrix(src, n_rows=4)


def test_load_labels(tmp_path: Path) -> None:
    src = write(tmp_path / "y.dat", "1\n-1\n1\n")
    labels = load_labels(src)
    np.testing.assert_array_equal(labels, [1, -1, 1])
    assert labels.dtype.kind == "i"


@pytest.mark.parametrize("text", ["1\n0\n", "1\n2\n", "1\n-1.5\n", "yes\n"])
def test_load_labels_rejects_other_values(tmp_path: Path, text: str) -> None:
    src = write(tmp_path / "y.dat", text)
    with pytest.raises(DataLoadFailure):
        load_labels(src)


def test_write_labels(tmp_path: Path) -> None:
    out = write_labels(tmp_path / "out.dat", np.array([1, -1, -1]))
    assert out.read_text().split() == ["1", "-1", "-1"]


def test_write_labels_unwritable(tmp_path: Path) -> None:
    with pytest.raises(DataWriteFailure):
        write_labels(tmp_path / "missing_dir" / "out.dat", [1, -1])
    with pytest.raises(DataWriteFailure):
        write_labels(tmp_path, [1, -1])


def test_load_dataset_row_layout(tmp_path: Path) -> None:
    X_train, y_train, X_test = load_dataset(
        write(tmp_path / "dataX.dat", "1 1\n2 2\n-1 -1\n-2 -2\n"),
        write(tmp_path / "dataY.dat", "1\n1\n-1\n-1\n"),
        write(tmp_path / "dataXtest.dat", "0.5 0.5\n-0.5 -0.5\n"),
    )
    assert X_train.shape == (4, 2)
    assert y_train.tolist() == [1, 1, -1, -1]
    assert X_test.shape == (2, 2)


def test_load_dataset_flat_stream_layout(tmp_path: Path) -> None:
    X_train, y_train, X_test = load_dataset(
        write(tmp_path / "dataX.dat", "1 1 2 2 -1 -1 -2 -2\n"),
        write(tmp_path / "dataY.dat", "1\n1\n-1\n-1\n"),
        write(tmp_path / "dataXtest.dat", "1.5\n1.5\n-1\n-1\n"),
    )
    np.testing.assert_array_equal(X_train, [[1, 1], [2, 2], [-1, -1], [-2, -2]])
    np.testing.assert_array_equal(X_test, [[1.5, 1.5], [-1, -1]])


def test_load_dataset_test_width_mismatch(tmp_path: Path) -> None:
    with pytest.raises(DataLoadFailure):
        load_dataset(
            write(tmp_path / "dataX.dat", "1 1\n2 2\n"),
            write(tmp_path / "dataY.dat", "1\n-1\n"),
            write(tmp_path / "dataXtest.dat", "1 2 3\n"),
        )


def test_add_constant_column() -> None:
    X = add_constant_column([[1.0, 2.0], [3.0, 4.0]])
    np.testing.assert_array_equal(X, [[1.0, 2.0, 1.0], [3.0, 4.0, 1.0]])
