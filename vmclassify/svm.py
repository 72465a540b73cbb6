"""Support vector machine classifier."""

from __future__ import annotations

from typing import Any, Iterable

from .vector_machine import VectorMachineClassifier


class SvmClassifier(VectorMachineClassifier):
    """Classifier based on a support vector machine.

    The hyperplane distance of a feature vector is the sum of the kernel values
    between it and each support vector, scaled by the coefficients, minus the bias.
    A feature vector is positive when its distance reaches the threshold.
    """

    def __init__(self, kernel: Any) -> None:
        super().__init__(kernel)
        self._support_vectors: list[Any] = []
        self._coefficients: list[float] = []

    @property
    def support_vectors(self) -> tuple[Any, ...]:
        """The support vectors."""
        return tuple(self._support_vectors)

    @property
    def coefficients(self) -> tuple[float, ...]:
        """The coefficients of the support vectors."""
        return tuple(self._coefficients)

    def classify(self, feature_vector: Any) -> bool:
        """Return whether the feature vector is classified as positive."""
        return self.classify_distance(self.compute_hyperplane_distance(feature_vector))

    def get_confidence(self, feature_vector: Any) -> tuple[bool, float]:
        """Return the label of the feature vector and the confidence in it."""
        return self.confidence_for_distance(self.compute_hyperplane_distance(feature_vector))

    def classify_distance(self, distance: float) -> bool:
        """Return whether a hyperplane distance would be classified as positive."""
        return distance >= self.threshold

    def confidence_for_distance(self, distance: float) -> tuple[bool, float]:
        """Return the label and confidence that belong to a hyperplane distance."""
        if self.classify_distance(distance):
            return True, distance
        return False, -distance

    def compute_hyperplane_distance(self, feature_vector: Any) -> float:
        """Return the distance of the feature vector to the decision hyperplane.

        The threshold has no influence on this value.
        """
        distance = -self.bias
        for coefficient, support_vector in zip(self._coefficients, self._support_vectors):
            distance += coefficient * self.kernel.compute(feature_vector, support_vector)
        return float(distance)

    def set_svm_parameters(
        self,
        support_vectors: Iterable[Any],
        coefficients: Iterable[float],
        bias: float,
    ) -> None:
        """Replace the support vectors, their coefficients and the bias."""
        support_vectors = list(support_vectors)
        coefficients = [float(value) for value in coefficients]
        if len(support_vectors) != len(coefficients):
            raise ValueError(
                f"got {len(support_vectors)} support vectors but {len(coefficients)} coefficients"
            )
        self._support_vectors = support_vectors
        self._coefficients = coefficients
        self.bias = float(bias)

    def set_svm_threshold(self, threshold: float) -> None:
        """Set the threshold the hyperplane distance is compared against."""
        self.threshold = float(threshold)