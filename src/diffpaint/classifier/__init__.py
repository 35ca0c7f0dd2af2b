"""Diff line classifier."""

from diffpaint.classifier.engine import DiffClassifier, delta

__all__ = ["DiffClassifier", "delta"]
