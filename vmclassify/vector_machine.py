"""Common state of kernel-based vector machine classifiers."""

from __future__ import annotations

from typing import Any


class VectorMachineClassifier:
    """Base of vector machine classifiers: a kernel, a bias and a decision threshold.

    The threshold is what the hyperplane distance is compared against to decide the
    label; the bias is subtracted from the sum of the scaled kernel values.
    """

    def __init__(self, kernel: Any) -> None:
        self.kernel = kernel
        self.threshold = 0.0
        self.bias = 0.0