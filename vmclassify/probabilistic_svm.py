"""Support vector machine with pseudo-probabilistic output."""

from __future__ import annotations

import logging
import math
from os import PathLike
from typing import Any, Union

import numpy as np
import scipy.io
from scipy.io.matlab import MatReadError

from .svm import SvmClassifier

_log = logging.getLogger(__name__)

DEFAULT_LOGISTIC_A = 0.00556
DEFAULT_LOGISTIC_B = -2.95


class ProbabilisticSvmClassifier:
    """SVM classifier whose hyperplane distance is turned into a probability.

    The probability of a distance x is p(x) = 1 / (1 + exp(a + b * x)).
    """

    def __init__(
        self,
        svm: SvmClassifier,
        logistic_a: float = DEFAULT_LOGISTIC_A,
        logistic_b: float = DEFAULT_LOGISTIC_B,
    ) -> None:
        self.svm = svm
        self.logistic_a = float(logistic_a)
        self.logistic_b = float(logistic_b)

    @classmethod
    def from_kernel(
        cls,
        kernel: Any,
        logistic_a: float = DEFAULT_LOGISTIC_A,
        logistic_b: float = DEFAULT_LOGISTIC_B,
    ) -> "ProbabilisticSvmClassifier":
        """Create a probabilistic classifier around a new SVM using ``kernel``."""
        return cls(SvmClassifier(kernel), logistic_a, logistic_b)

    def classify(self, feature_vector: Any) -> bool:
        """Return whether the feature vector is classified as positive."""
        return self.svm.classify(feature_vector)

    def get_confidence(self, feature_vector: Any) -> tuple[bool, float]:
        """Return the label of the feature vector and the confidence in it."""
        return self.svm.get_confidence(feature_vector)

    def get_probability(self, feature_vector: Any) -> tuple[bool, float]:
        """Return the label of the feature vector and its probability of being positive."""
        return self.probability_for_distance(self.svm.compute_hyperplane_distance(feature_vector))

    def probability_for_distance(self, distance: float) -> tuple[bool, float]:
        """Return the label and probability of being positive for a hyperplane distance."""
        exponent = self.logistic_a + self.logistic_b * distance
        if exponent >= 0:
            damped = math.exp(-exponent)
            probability = damped / (1.0 + damped)
        else:
            probability = 1.0 / (1.0 + math.exp(exponent))
        return self.svm.classify_distance(distance), probability

    def set_logistic_parameters(self, logistic_a: float, logistic_b: float) -> None:
        """Replace the parameters a and b of the logistic function."""
        self.logistic_a = float(logistic_a)
        self.logistic_b = float(logistic_b)


def load_sigmoid_params_from_matlab(
    logistic_filename: Union[str, "PathLike[str]"],
) -> tuple[float, float]:
    """Read the logistic parameters (a, b) from ``posterior_svm`` in a MATLAB file.

    The vector holds b first and a second. When it is missing or does not have
    two columns, probabilistic output is disabled and (0.0, 0.0) is returned.
    """
    try:
        contents = scipy.io.loadmat(logistic_filename)
    except (OSError, ValueError, MatReadError) as exc:
        raise RuntimeError(
            "ProbabilisticSvmClassifier: Unable to open the logistic file to read the "
            f"logistic parameters (wrong format?):{logistic_filename}"
        ) from exc

    if "posterior_svm" not in contents:
        _log.warning("Unable to find the vector posterior_svm, disable prob. SVM output")
        return 0.0, 0.0
    posterior = np.asarray(contents["posterior_svm"], dtype=np.float64)
    columns = posterior.shape[1] if posterior.ndim >= 2 else posterior.size
    if columns != 2:
        _log.warning("Size of vector posterior_svm != 2, disable prob. SVM output")
        return 0.0, 0.0
    values = posterior.ravel(order="F")
    logistic_b, logistic_a = float(values[0]), float(values[1])
    return logistic_a, logistic_b