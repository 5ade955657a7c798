from __future__ import annotations

"""
CLI entrypoint for the two +1/-1 classifiers. Pick the model via --experiment:
logreg (batch gradient-descent logistic regression) or knn (k nearest neighbours).
"""

import argparse
import logging
import sys
from pathlib import Path

import numpy as np

from signvote import (
    ClassifierConfig,
    LogisticRegressionGD,
    SignVoteError,
    add_constant_column,
    build_classifier,
    compute_classification_metrics,
    load_dataset,
    load_labels,
    summarize_weights,
    write_labels,
)
from signvote.config import EXPERIMENTS
from signvote.constants import (
    DEFAULT_ALPHA,
    DEFAULT_K,
    DEFAULT_MAX_ITER,
    DEFAULT_TOLERANCE,
    KNN_OUTPUT_FILE,
    LOGREG_OUTPUT_FILE,
    TEST_FEATURES_FILE,
    TRAIN_FEATURES_FILE,
    TRAIN_LABELS_FILE,
)
from signvote.metrics import majority_baseline

DEFAULT_OUTPUTS = {"logreg": LOGREG_OUTPUT_FILE, "knn": KNN_OUTPUT_FILE}


def describe_data(X_train: np.ndarray, y_train: np.ndarray, X_test: np.ndarray):
    """Print a short summary of dataset sizes and label balance."""
    print(f"Train samples: {X_train.shape[0]}, features: {X_train.shape[1]}")
    print(f"Positive rate (train): {np.mean(y_train == 1):.3f}")
    print(f"Test samples: {X_test.shape[0]}")


def print_metrics(label: str, metrics: dict):
    """Nicely format the metric dict produced by compute_classification_metrics."""
    cm = metrics["confusion_matrix"]
    print(
        f"[{label}] Acc {metrics['accuracy']:.3f} | "
        f"Prec {metrics['precision']:.3f} | Rec {metrics['recall']:.3f} | "
        f"F1 {metrics['f1']:.3f}"
    )
    print(f"    Confusion matrix [[TN, FP], [FN, TP]]: {cm.tolist()}")


def build_arg_parser():
    """CLI parser with knobs for input files, model params, and experiment choice."""
    parser = argparse.ArgumentParser(
        description="Classify +1/-1 labelled data with logistic regression or kNN."
    )
    parser.add_argument(
        "--experiment",
        choices=EXPERIMENTS,
        default="logreg",
        help="logreg: gradient-descent logistic regression; knn: k nearest neighbours.",
    )
    parser.add_argument("--train-x", type=Path, default=Path(TRAIN_FEATURES_FILE))
    parser.add_argument("--train-y", type=Path, default=Path(TRAIN_LABELS_FILE))
    parser.add_argument("--test-x", type=Path, default=Path(TEST_FEATURES_FILE))
    parser.add_argument(
        "--test-y",
        type=Path,
        default=None,
        help="Optional true test labels; prints accuracy/precision/recall/F1 when given.",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help=f"Where to write predictions (default {LOGREG_OUTPUT_FILE} / {KNN_OUTPUT_FILE}).",
    )
    parser.add_argument("--alpha", type=float, default=DEFAULT_ALPHA, help="Step size for GD.")
    parser.add_argument("--tol", type=float, default=DEFAULT_TOLERANCE, help="Stop once max|update| < tol.")
    parser.add_argument("--max-iter", type=int, default=DEFAULT_MAX_ITER, help="Max steps for GD.")
    parser.add_argument(
        "--accept-nonconverged",
        action="store_true",
        help="Use the best-so-far weights when GD hits --max-iter instead of failing.",
    )
    parser.add_argument(
        "--add-intercept",
        action="store_true",
        help="Append a constant 1 column to both matrices (the model has no bias term).",
    )
    parser.add_argument("--k", type=int, default=DEFAULT_K, help="Neighbour count for kNN.")
    parser.add_argument("--n-jobs", type=int, default=None, help="Threads for kNN queries.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging.")
    return parser


def run(args: argparse.Namespace) -> np.ndarray:
    """Load data, fit the selected classifier, write and return its predictions."""
    config = ClassifierConfig.from_args(args)
    X_train, y_train, X_test = load_dataset(args.train_x, args.train_y, args.test_x)
    if args.add_intercept:
        X_train, X_test = add_constant_column(X_train), add_constant_column(X_test)

    describe_data(X_train, y_train, X_test)

    model = build_classifier(config, args.experiment)
    model.fit(X_train, y_train)
    preds = model.predict(X_test)

    if isinstance(model, LogisticRegressionGD):
        status = "converged" if model.converged_ else "NOT converged (best-so-far weights)"
        print(f"GD steps: {model.n_iter_}, {status}")
        top = summarize_weights(model.coef_)
        print("Largest positive weights:")
        print(top["positive"])
        print("Largest negative weights:")
        print(top["negative"])
    else:
        print(f"kNN with k={config.k}")

    print(f"Predicted positive rate: {np.mean(preds == 1):.3f}")

    if args.test_y is not None:
        y_test = load_labels(args.test_y)
        print_metrics("Majority baseline", majority_baseline(y_train, y_test))
        print_metrics(args.experiment, compute_classification_metrics(y_test, preds))

    output = args.output or Path(DEFAULT_OUTPUTS[args.experiment])
    write_labels(output, preds)
    print(f"Predictions written to {output}")
    return preds


def main(args: argparse.Namespace | None = None) -> int:
    """Dispatch to the selected experiment; returns the process exit status."""
    args = args or build_arg_parser().parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )

    try:
        run(args)
    except SignVoteError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
