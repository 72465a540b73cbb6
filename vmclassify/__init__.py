"""Kernel-based SVM and RVM classifiers with probabilistic output and training example management."""

__version__ = "0.1.0"

__all__ = [
    "examples",
    "vector_machine",
    "svm",
    "two_stage",
    "trainable_svm",
    "probabilistic_svm",
    "rvm",
    "trainable_probabilistic_svm",
    "probabilistic_rvm",
]