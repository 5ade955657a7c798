from __future__ import annotations

"""
Hyperparameter bundle consumed by the CLI and by build_classifier.
"""

import argparse
from dataclasses import asdict, dataclass

from .base import BinaryClassifier
from .constants import DEFAULT_ALPHA, DEFAULT_K, DEFAULT_MAX_ITER, DEFAULT_TOLERANCE
from .errors import InvalidParameter
from .knn import KNNClassifier
from .logreg import LogisticRegressionGD
from .validation import check_n_jobs, check_positive, check_positive_int

EXPERIMENTS = ("logreg", "knn")


@dataclass
class ClassifierConfig:
    alpha: float = DEFAULT_ALPHA
    tolerance: float = DEFAULT_TOLERANCE
    max_iter: int = DEFAULT_MAX_ITER
    k: int = DEFAULT_K
    n_jobs: int | None = None
    accept_nonconverged: bool = False

    def validate(self) -> "ClassifierConfig":
        """Raise InvalidParameter for any value outside its domain; k <= n is checked at fit time."""
        check_positive(self.alpha, "alpha")
        check_positive(self.tolerance, "tolerance")
        check_positive_int(self.max_iter, "max_iter")
        check_positive_int(self.k, "k")
        check_n_jobs(self.n_jobs)
        return self

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> "ClassifierConfig":
        return cls(
            alpha=args.alpha,
            tolerance=args.tol,
            max_iter=args.max_iter,
            k=args.k,
            n_jobs=args.n_jobs,
            accept_nonconverged=args.accept_nonconverged,
        ).validate()


def build_classifier(config: ClassifierConfig, experiment: str) -> BinaryClassifier:
    """Instantiate the classifier for ``experiment`` ("logreg" or "knn")."""
    config.validate()
    if experiment == "logreg":
        return LogisticRegressionGD(
            alpha=config.alpha,
            tolerance=config.tolerance,
            max_iter=config.max_iter,
            allow_nonconvergence=config.accept_nonconverged,
        )
    if experiment == "knn":
        return KNNClassifier(k=config.k, n_jobs=config.n_jobs)
    raise InvalidParameter(f"Unknown experiment: {experiment}")
