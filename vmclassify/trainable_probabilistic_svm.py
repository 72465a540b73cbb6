"""Probabilistic support vector machine that can be re-trained."""

from __future__ import annotations

import math
from typing import Any, Iterable, Optional, Sequence

from .probabilistic_svm import ProbabilisticSvmClassifier
from .svm import SvmClassifier


class _TestExampleBuffer:
    """Bounded store of test examples that replaces the oldest ones once full."""

    def __init__(self, capacity: int) -> None:
        self.capacity = max(0, int(capacity))
        self.examples: list[Any] = []
        self._insert_position = 0

    def add(self, new_examples: Iterable[Any]) -> None:
        for example in new_examples:
            if len(self.examples) < self.capacity:
                self.examples.append(example)
                continue
            self.examples[self._insert_position] = example
            self._insert_position += 1
            if self._insert_position == len(self.examples):
                self._insert_position = 0

    def clear(self) -> None:
        self.examples.clear()


class TrainableProbabilisticSvmClassifier:
    """Probabilistic SVM classifier that can be re-trained.

    After each successful training the parameters of the logistic function are
    computed so that the mean SVM output of the positive test examples maps to
    ``high_probability`` and that of the negative test examples to
    ``low_probability``.
    """

    def __init__(
        self,
        trainable_svm: Any,
        positive_count: int,
        negative_count: int,
        high_probability: float = 0.99,
        low_probability: float = 0.01,
    ) -> None:
        self.trainable_svm = trainable_svm
        self.probabilistic_svm = ProbabilisticSvmClassifier(trainable_svm.svm)
        self._positive_tests = _TestExampleBuffer(positive_count)
        self._negative_tests = _TestExampleBuffer(negative_count)
        self.high_probability = float(high_probability)
        self.low_probability = float(low_probability)
        self.adjust_threshold = False
        self.target_probability = 0.5

    @property
    def positive_test_examples(self) -> tuple[Any, ...]:
        """The stored positive test examples."""
        return tuple(self._positive_tests.examples)

    @property
    def negative_test_examples(self) -> tuple[Any, ...]:
        """The stored negative test examples."""
        return tuple(self._negative_tests.examples)

    def classify(self, feature_vector: Any) -> bool:
        """Return whether the feature vector is classified as positive."""
        return self.probabilistic_svm.classify(feature_vector)

    def get_confidence(self, feature_vector: Any) -> tuple[bool, float]:
        """Return the label of the feature vector and the confidence in it."""
        return self.probabilistic_svm.get_confidence(feature_vector)

    def get_probability(self, feature_vector: Any) -> tuple[bool, float]:
        """Return the label of the feature vector and its probability of being positive."""
        return self.probabilistic_svm.get_probability(feature_vector)

    def is_usable(self) -> bool:
        """Whether the underlying SVM has been trained and can be used."""
        return self.trainable_svm.is_usable()

    def retrain(
        self,
        new_positive_examples: Sequence[Any],
        new_negative_examples: Sequence[Any],
        new_positive_test_examples: Optional[Sequence[Any]] = None,
        new_negative_test_examples: Optional[Sequence[Any]] = None,
    ) -> bool:
        """Re-train the SVM and update the logistic parameters.

        The test examples default to the training examples. Returns whether
        the training succeeded.
        """
        new_positive_examples = list(new_positive_examples)
        new_negative_examples = list(new_negative_examples)
        if new_positive_test_examples is None:
            new_positive_test_examples = new_positive_examples
        if new_negative_test_examples is None:
            new_negative_test_examples = new_negative_examples

        if self._positive_tests.capacity > 0 and self._negative_tests.capacity > 0:
            self._positive_tests.add(new_positive_test_examples)
            self._negative_tests.add(new_negative_test_examples)

        if not self.trainable_svm.retrain(new_positive_examples, new_negative_examples):
            return False

        svm = self.probabilistic_svm.svm
        logistic_a, logistic_b = self._logistic_parameters_for(svm)
        self.probabilistic_svm.set_logistic_parameters(logistic_a, logistic_b)
        if self.adjust_threshold:
            target = (math.log(1.0 / self.target_probability - 1.0) - logistic_a) / logistic_b
            svm.set_svm_threshold(target)
        return True

    def reset(self) -> None:
        """Forget the stored test examples and reset the underlying SVM."""
        self._positive_tests.clear()
        self._negative_tests.clear()
        self.trainable_svm.reset()

    def set_adjust_threshold(self, target_probability: float) -> None:
        """Adjust the SVM threshold at each re-training to the given probability."""
        self.adjust_threshold = True
        self.target_probability = float(target_probability)

    def compute_logistic_parameters(
        self, mean_pos_output: float, mean_neg_output: float
    ) -> tuple[float, float]:
        """Return (a, b) of p(x) = 1 / (1 + exp(a + b * x)) from the mean outputs."""
        if mean_neg_output == mean_pos_output:
            raise ValueError("mean outputs of positive and negative examples must differ")
        high, low = self.high_probability, self.low_probability
        logistic_b = (
            math.log((1 - low) / low) - math.log((1 - high) / high)
        ) / (mean_neg_output - mean_pos_output)
        logistic_a = math.log((1 - high) / high) - logistic_b * mean_pos_output
        return logistic_a, logistic_b

    def compute_mean_output(self, svm: SvmClassifier, examples: Iterable[Any]) -> float:
        """Return the mean hyperplane distance of the examples (NaN when there are none)."""
        distances = [svm.compute_hyperplane_distance(example) for example in examples]
        if not distances:
            return math.nan
        return sum(distances) / len(distances)

    def _logistic_parameters_for(self, svm: SvmClassifier) -> tuple[float, float]:
        mean_pos = self.compute_mean_output(svm, self._positive_tests.examples)
        mean_neg = self.compute_mean_output(svm, self._negative_tests.examples)
        if math.isnan(mean_pos) or math.isnan(mean_neg):
            return math.nan, math.nan
        return self.compute_logistic_parameters(mean_pos, mean_neg)