"""Storage strategies for training examples."""

from __future__ import annotations

import itertools
from abc import ABC, abstractmethod
from typing import Any, Iterable, Iterator, Protocol


class _ConfidenceSource(Protocol):
    def get_confidence(self, feature_vector: Any) -> tuple[bool, float]: ...


class VectorBasedExampleManagement(ABC):
    """Example storage that keeps the training examples in a single list."""

    def __init__(self, capacity: int, required_size: int = 1) -> None:
        self.capacity = capacity
        self.required_size = required_size
        self._examples: list[Any] = []

    @abstractmethod
    def add(self, new_examples: Iterable[Any]) -> None:
        """Add new training examples, possibly replacing existing ones."""

    def has_required_size(self) -> bool:
        """Whether enough examples are stored for training."""
        return len(self._examples) >= self.required_size

    def clear(self) -> None:
        """Remove all stored examples."""
        self._examples.clear()

    def __len__(self) -> int:
        return len(self._examples)

    def __iter__(self) -> Iterator[Any]:
        return iter(list(self._examples))


class AgeBasedExampleManagement(VectorBasedExampleManagement):
    """Example storage that replaces the oldest examples once it is full."""

    def __init__(self, capacity: int, required_size: int = 1) -> None:
        super().__init__(capacity, required_size)
        self._insert_position = 0

    def add(self, new_examples: Iterable[Any]) -> None:
        pending = iter(new_examples)
        for example in pending:
            if len(self._examples) < self.capacity:
                self._examples.append(example)
                continue
            self._replace_oldest(example)
            break
        for example in pending:
            self._replace_oldest(example)

    def clear(self) -> None:
        super().clear()

    def _replace_oldest(self, example: Any) -> None:
        self._examples[self._insert_position] = example
        self._insert_position += 1
        if self._insert_position == len(self._examples):
            self._insert_position = 0


class ConfidenceBasedExampleManagement(VectorBasedExampleManagement):
    """Example storage that, once full, replaces the examples the classifier is most confident about.

    The first examples (one by default) are never replaced.
    """

    def __init__(
        self,
        classifier: _ConfidenceSource,
        positive: bool,
        capacity: int,
        required_size: int = 1,
    ) -> None:
        super().__init__(capacity, required_size)
        self.classifier = classifier
        self.positive = positive
        self.keep = 1

    def set_first_examples_to_keep(self, keep: int) -> None:
        """Set how many initial examples are never replaced."""
        self.keep = keep

    def _score(self, example: Any) -> float:
        label, confidence = self.classifier.get_confidence(example)
        return confidence if self.positive == bool(label) else -confidence

    def add(self, new_examples: Iterable[Any]) -> None:
        new_examples = list(new_examples)
        existing = sorted(
            ((index, self._score(self._examples[index]))
             for index in range(self.keep, len(self._examples))),
            key=lambda item: item[1],
            reverse=True,
        )
        incoming = sorted(
            ((index, self._score(example)) for index, example in enumerate(new_examples)),
            key=lambda item: item[1],
        )

        remaining = iter(incoming)
        leftover: list[tuple[int, float]] = []
        for item in remaining:
            if len(self._examples) < self.capacity:
                self._examples.append(new_examples[item[0]])
            else:
                leftover.append(item)
                break
        leftover.extend(remaining)

        for (old_index, old_score), (new_index, new_score) in zip(existing, leftover):
            if not new_score < old_score:
                break
            self._examples[old_index] = new_examples[new_index]


class UnlimitedExampleManagement(VectorBasedExampleManagement):
    """Example storage that never replaces existing examples."""

    def __init__(self, required_size: int = 1) -> None:
        super().__init__(10, required_size)

    def add(self, new_examples: Iterable[Any]) -> None:
        self._examples.extend(new_examples)


class FrameBasedExampleManagement:
    """Example storage grouped by frame; each call to ``add`` stores one frame.

    The examples of the most recent ``frame_capacity`` frames are kept.
    """

    def __init__(self, frame_capacity: int, required_size: int = 1) -> None:
        if frame_capacity < 1:
            raise ValueError("frame_capacity must be at least 1")
        self.required_size = required_size
        self._frames: list[list[Any]] = [[] for _ in range(frame_capacity)]
        self._oldest = 0

    def add(self, new_examples: Iterable[Any]) -> None:
        self._frames[self._oldest] = list(new_examples)
        self._oldest = (self._oldest + 1) % len(self._frames)

    def clear(self) -> None:
        for frame in self._frames:
            frame.clear()
        self._oldest = 0

    def __len__(self) -> int:
        return sum(len(frame) for frame in self._frames)

    def has_required_size(self) -> bool:
        return len(self) >= self.required_size

    def __iter__(self) -> Iterator[Any]:
        return itertools.chain.from_iterable([list(frame) for frame in self._frames])