"""Accuracy metric and its display string."""

from __future__ import annotations

import numpy as np
from sklearn.metrics import accuracy_score


def compute_accuracy(predictions: np.ndarray, labels: np.ndarray) -> float:
    """Fraction of predictions equal to the true labels."""
    if len(predictions) != len(labels):
        raise ValueError(
            f'Got {len(predictions)} predictions for {len(labels)} labels'
        )
    if len(labels) == 0:
        raise ValueError('Cannot compute accuracy on an empty set')
    return float(accuracy_score(labels, predictions))


def format_accuracy(accuracy: float) -> str:
    return f'Test Accuracy: {accuracy * 100.0}%'
