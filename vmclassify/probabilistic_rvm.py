"""Reduced vector machine with pseudo-probabilistic output."""

from __future__ import annotations

import logging
import math
from os import PathLike
from typing import Any, Optional, Union

import numpy as np
import scipy.io
from scipy.io.matlab import MatReadError

from .rvm import RvmClassifier

_log = logging.getLogger(__name__)

DEFAULT_LOGISTIC_A = 0.00556
DEFAULT_LOGISTIC_B = -2.85


class ProbabilisticRvmClassifier:
    """RVM classifier whose hyperplane distance is turned into a probability.

    The probability of a distance x is p(x) = 1 / (1 + exp(a + b * x)). It is
    computed for every feature vector, including those rejected before the last
    filter level of the cascade.
    """

    def __init__(
        self,
        rvm: Optional[RvmClassifier] = None,
        logistic_a: float = DEFAULT_LOGISTIC_A,
        logistic_b: float = DEFAULT_LOGISTIC_B,
    ) -> None:
        self.rvm = rvm
        self.logistic_a = float(logistic_a)
        self.logistic_b = float(logistic_b)

    def classify(self, feature_vector: Any) -> bool:
        """Return whether the feature vector is classified as positive."""
        return self.rvm.classify(feature_vector)

    def get_confidence(self, feature_vector: Any) -> tuple[bool, float]:
        """Return the label of the feature vector and the confidence in it."""
        return self.rvm.get_confidence(feature_vector)

    def get_probability(self, feature_vector: Any) -> tuple[bool, float]:
        """Return the label of the feature vector and its probability of being positive."""
        return self.probability_for_level(self.rvm.compute_hyperplane_distance(feature_vector))

    def probability_for_level(self, level_and_distance: tuple[int, float]) -> tuple[bool, float]:
        """Return the label and probability for a (last filter level, distance) pair."""
        exponent = self.logistic_a + self.logistic_b * level_and_distance[1]
        if exponent >= 0:
            damped = math.exp(-exponent)
            probability = damped / (1.0 + damped)
        else:
            probability = 1.0 / (1.0 + math.exp(exponent))
        return self.rvm.classify_level(level_and_distance), probability

    def set_logistic_parameters(self, logistic_a: float, logistic_b: float) -> None:
        """Replace the parameters a and b of the logistic function."""
        self.logistic_a = float(logistic_a)
        self.logistic_b = float(logistic_b)


def load_sigmoid_params_from_matlab(
    logistic_filename: Union[str, "PathLike[str]"],
) -> tuple[float, float]:
    """Read the logistic parameters (a, b) from ``posterior_wrvm`` in a MATLAB file.

    The vector holds b first and a second.
    """
    try:
        contents = scipy.io.loadmat(logistic_filename)
    except (OSError, ValueError, MatReadError) as exc:
        raise ValueError(
            "ProbabilisticRvmClassifier: Unable to open the thresholds-file: "
            f"{logistic_filename}"
        ) from exc

    if "posterior_wrvm" not in contents:
        raise RuntimeError(
            "ProbabilisticRvmClassifier: Unable to find the vector posterior_wrvm. If you "
            "don't want probabilistic output, don't use a probabilistic classifier."
        )
    posterior = np.asarray(contents["posterior_wrvm"], dtype=np.float64)
    columns = posterior.shape[1] if posterior.ndim >= 2 else posterior.size
    if columns != 2:
        raise RuntimeError(
            "ProbabilisticRvmClassifier: Size of vector posterior_wrvm != 2. If you "
            "don't want probabilistic output, don't use a probabilistic classifier."
        )
    values = posterior.ravel(order="F")
    logistic_b, logistic_a = float(values[0]), float(values[1])
    _log.debug("Read logistic parameters a=%s, b=%s", logistic_a, logistic_b)
    return logistic_a, logistic_b