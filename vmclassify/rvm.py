"""Reduced vector machine classifier."""

from __future__ import annotations

from typing import Any

from .vector_machine import VectorMachineClassifier


class RvmClassifier(VectorMachineClassifier):
    """Classifier based on a reduced vector machine.

    Unlike an SVM, an RVM has a set of coefficients for every filter level of its
    cascade (level ``n`` weighs vectors ``0..n``) and a threshold for every level.
    It runs as a cascade: a feature vector whose distance at a level falls below
    that level's threshold is rejected early.
    """

    def __init__(self, kernel: Any) -> None:
        super().__init__(kernel)
        self.support_vectors: list[Any] = []
        self.coefficients: list[list[float]] = []
        self.hierarchical_thresholds: list[float] = []
        self.num_filters_to_use = 0

    def classify(self, feature_vector: Any) -> bool:
        """Return whether the feature vector is classified as positive."""
        return self.classify_level(self.compute_hyperplane_distance(feature_vector))

    def get_confidence(self, feature_vector: Any) -> tuple[bool, float]:
        """Return the label of the feature vector and the confidence in it."""
        return self.confidence_for_level(self.compute_hyperplane_distance(feature_vector))

    def classify_level(self, level_and_distance: tuple[int, float]) -> bool:
        """Return whether a (last filter level, distance) pair is positive.

        Only feature vectors that ran through the last used filter and reached
        its threshold are positive.
        """
        level, distance = level_and_distance
        return (
            level + 1 == self.num_filters_to_use
            and distance >= self.hierarchical_thresholds[level]
        )

    def confidence_for_level(self, level_and_distance: tuple[int, float]) -> tuple[bool, float]:
        """Return the label and confidence for a (last filter level, distance) pair."""
        distance = level_and_distance[1]
        if self.classify_level(level_and_distance):
            return True, distance
        return False, -distance

    def compute_hyperplane_distance(self, feature_vector: Any) -> tuple[int, float]:
        """Run the cascade and return the last filter level used and its distance.

        The threshold has no influence on the distance. Each level after the first
        extends the previous level's distance by the newly added vector's term.
        """
        cache: list[float] = []
        level = -1
        while True:
            level += 1
            distance = self._distance_cached(feature_vector, level, cache)
            if not (
                distance >= self.hierarchical_thresholds[level]
                and level + 1 < self.num_filters_to_use
            ):
                break
        return level, distance

    def distance_at_level(self, feature_vector: Any, filter_level: int) -> float:
        """Return the distance of the feature vector to the hyperplane of one filter level."""
        weights = self.coefficients[filter_level]
        distance = -self.bias
        for i in range(filter_level + 1):
            distance += weights[i] * self.kernel.compute(feature_vector, self.support_vectors[i])
        return float(distance)

    def _distance_cached(self, feature_vector: Any, filter_level: int, cache: list[float]) -> float:
        if filter_level != 0 and len(cache) == filter_level:
            distance = cache[filter_level - 1] + self.coefficients[filter_level][
                filter_level
            ] * self.kernel.compute(feature_vector, self.support_vectors[filter_level])
            distance = float(distance)
            cache.append(distance)
            return distance
        cache.clear()
        distance = self.distance_at_level(feature_vector, filter_level)
        cache.append(distance)
        return distance

    def set_num_filters_to_use(self, num_filters: int) -> None:
        """Set how many filters the cascade uses; zero or too many means all of them."""
        if num_filters == 0 or num_filters > len(self.coefficients):
            self.num_filters_to_use = len(self.coefficients)
        else:
            self.num_filters_to_use = num_filters