"""Numeric primitives: dot product and a numerically stable softmax."""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np

from .errors import DimensionMismatch


def dot(a: Sequence[float] | np.ndarray, b: Sequence[float] | np.ndarray) -> float:
    """Return the sum of pairwise products of two equal-length vectors."""
    a_arr = np.asarray(a, dtype=float)
    b_arr = np.asarray(b, dtype=float)
    if a_arr.ndim != 1 or b_arr.ndim != 1:
        raise DimensionMismatch(
            f'dot expects two vectors, got shapes {a_arr.shape} and {b_arr.shape}'
        )
    if a_arr.shape[0] != b_arr.shape[0]:
        raise DimensionMismatch(
            f'dot expects equal lengths, got {a_arr.shape[0]} and {b_arr.shape[0]}'
        )
    return float(np.dot(a_arr, b_arr))


def softmax(scores: Sequence[float] | np.ndarray) -> np.ndarray:
    """
    Turn scores into a probability distribution.

    The maximum score is subtracted before exponentiating, so large logits
    cannot overflow. A 2-D input is normalised row by row.

    Args:
        scores: Vector of length n_classes, or matrix (n_samples, n_classes).

    Returns:
        Array of the same shape whose entries (per row) sum to 1.

    Raises:
        DimensionMismatch: If the input is empty or has more than 2 dimensions.
    """
    arr = np.asarray(scores, dtype=float)
    if arr.ndim not in (1, 2) or arr.shape[-1] == 0:
        raise DimensionMismatch(f'softmax expects a non-empty vector or matrix, got {arr.shape}')

    shifted = arr - arr.max(axis=-1, keepdims=True)
    exp_scores = np.exp(shifted)
    return exp_scores / exp_scores.sum(axis=-1, keepdims=True)
