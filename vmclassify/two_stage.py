"""Cascade of two probabilistic classifiers."""

from __future__ import annotations

from typing import Any


class ProbabilisticTwoStageClassifier:
    """Probabilistic classifier that asks a second classifier only when the first one accepts."""

    def __init__(self, first: Any, second: Any) -> None:
        self.first = first
        self.second = second

    def classify(self, feature_vector: Any) -> bool:
        """Return true only if both stages classify the feature vector as positive."""
        if self.first.classify(feature_vector):
            return self.second.classify(feature_vector)
        return False

    def get_confidence(self, feature_vector: Any) -> tuple[bool, float]:
        """Return the first stage's confidence if it rejects, otherwise the second stage's."""
        result = self.first.get_confidence(feature_vector)
        if result[0]:
            return self.second.get_confidence(feature_vector)
        return result

    def get_probability(self, feature_vector: Any) -> tuple[bool, float]:
        """Return the first stage's probability if it rejects, otherwise the second stage's confidence."""
        result = self.first.get_probability(feature_vector)
        if result[0]:
            return self.second.get_confidence(feature_vector)
        return result