"""Support vector machine classifier that can be re-trained."""

from __future__ import annotations

from typing import Any

from .svm import SvmClassifier


class TrainableSvmClassifier:
    """Wrapper around an SVM classifier whose parameters are learned from examples.

    The classifier is not usable until training has produced parameters; subclasses
    that train the SVM set ``usable`` once that has happened.
    """

    def __init__(self, svm: SvmClassifier) -> None:
        self.svm = svm
        self.usable = False

    @classmethod
    def from_kernel(cls, kernel: Any) -> "TrainableSvmClassifier":
        """Create a trainable classifier around a new SVM using ``kernel``."""
        return cls(SvmClassifier(kernel))

    def classify(self, feature_vector: Any) -> bool:
        """Return whether the feature vector is classified as positive."""
        return self.svm.classify(feature_vector)

    def get_confidence(self, feature_vector: Any) -> tuple[bool, float]:
        """Return the label of the feature vector and the confidence in it."""
        return self.svm.get_confidence(feature_vector)

    def is_usable(self) -> bool:
        """Whether the classifier has been trained and can be used."""
        return self.usable