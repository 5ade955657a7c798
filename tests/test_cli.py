"""End-to-end runs of main.py against files in a temp directory."""

from __future__ import annotations

from pathlib import Path

import pytest

from main import build_arg_parser, main


@pytest.fixture
def data_dir(tmp_path: Path) -> Path:
    (tmp_path / "dataX.dat").write_text("1 1\n2 2\n-1 -1\n-2 -2\n")
    (tmp_path / "dataY.dat").write_text("1\n1\n-1\n-1\n")
    (tmp_path / "dataXtest.dat").write_text("1.5 1.5\n-1.5 -1.5\n")
    (tmp_path / "dataYtest.dat").write_text("1\n-1\n")
    return tmp_path


def cli_args(data_dir: Path, *extra: str):
    return build_arg_parser().parse_args(
        [
            "--train-x", str(data_dir / "dataX.dat"),
            "--train-y", str(data_dir / "dataY.dat"),
            "--test-x", str(data_dir / "dataXtest.dat"),
            *extra,
        ]
    )


def test_knn_run_writes_predictions(data_dir: Path, capsys) -> None:
    out = data_dir / "NN.dat"
    status = main(cli_args(data_dir, "--experiment", "knn", "--k", "3", "--output", str(out),
                           "--test-y", str(data_dir / "dataYtest.dat")))
    assert status == 0
    assert out.read_text().split() == ["1", "-1"]
    assert "[knn] Acc 1.000" in capsys.readouterr().out


def test_logreg_run_with_best_so_far_weights(data_dir: Path, capsys) -> None:
    out = data_dir / "LogReg.dat"
    status = main(cli_args(data_dir, "--max-iter", "2000", "--accept-nonconverged", "--output", str(out)))
    assert status == 0
    assert out.read_text().split() == ["1", "-1"]
    assert "NOT converged" in capsys.readouterr().out


def test_logreg_nonconvergence_is_reported(data_dir: Path, capsys) -> None:
    out = data_dir / "LogReg.dat"
    status = main(cli_args(data_dir, "--max-iter", "10", "--output", str(out)))
    assert status == 1
    assert "did not converge" in capsys.readouterr().err
    assert not out.exists()


def test_missing_input_is_reported(data_dir: Path, capsys) -> None:
    (data_dir / "dataY.dat").unlink()
    status = main(cli_args(data_dir, "--experiment", "knn", "--k", "1"))
    assert status == 1
    assert "not found" in capsys.readouterr().err


def test_add_intercept(data_dir: Path) -> None:
    out = data_dir / "LogReg.dat"
    status = main(cli_args(data_dir, "--add-intercept", "--max-iter", "500", "--accept-nonconverged",
                           "--output", str(out)))
    assert status == 0
    assert out.read_text().split() == ["1", "-1"]
