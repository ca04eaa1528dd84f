"""Softmax regression model: per-class weights and biases."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

import numpy as np

from .errors import DimensionMismatch, InvalidParameter
from .numeric import dot, softmax


class SoftmaxModel:
    """
    Weight matrix of shape (n_classes, n_features) plus one bias per class.

    Parameters start at zero. Only the trainer updates them; callers see
    read-only arrays through ``weights`` and ``bias``.
    """

    def __init__(self, n_classes: int, n_features: int) -> None:
        if n_classes < 1:
            raise InvalidParameter(f'n_classes must be >= 1, got {n_classes}')
        if n_features < 1:
            raise DimensionMismatch(f'n_features must be >= 1, got {n_features}')
        self._weights = np.zeros((n_classes, n_features), dtype=float)
        self._bias = np.zeros(n_classes, dtype=float)

    @property
    def n_classes(self) -> int:
        return self._weights.shape[0]

    @property
    def n_features(self) -> int:
        return self._weights.shape[1]

    @property
    def weights(self) -> np.ndarray:
        view = self._weights.view()
        view.flags.writeable = False
        return view

    @property
    def bias(self) -> np.ndarray:
        view = self._bias.view()
        view.flags.writeable = False
        return view

    def scores(self, sample: Sequence[float] | np.ndarray) -> np.ndarray:
        """Return ``dot(sample, weights[k]) + bias[k]`` for every class ``k``."""
        x = self._check_sample(sample)
        return np.array(
            [dot(x, self._weights[k]) + self._bias[k] for k in range(self.n_classes)],
        )

    def predict_proba(self, sample: Sequence[float] | np.ndarray) -> np.ndarray:
        return softmax(self.scores(sample))

    def predict_class(self, sample: Sequence[float] | np.ndarray) -> int:
        # np.argmax returns the first maximum, i.e. the lowest class index on ties
        return int(np.argmax(self.predict_proba(sample)))

    def batch_scores(self, features: np.ndarray) -> np.ndarray:
        """Scores for every row of an already validated (n_samples, n_features) matrix."""
        return features @ self._weights.T + self._bias

    def to_dict(self) -> dict[str, Any]:
        """Plain-Python copy of the parameters for callers that want to serialise them."""
        return {
            'n_classes': self.n_classes,
            'n_features': self.n_features,
            'weights': self._weights.tolist(),
            'bias': self._bias.tolist(),
        }

    def _apply_gradients(
        self,
        dw: np.ndarray,
        db: np.ndarray,
        learning_rate: float,
        n_samples: int,
    ) -> None:
        self._weights -= learning_rate * dw / n_samples
        self._bias -= learning_rate * db / n_samples

    def _check_sample(self, sample: Sequence[float] | np.ndarray) -> np.ndarray:
        try:
            x = np.asarray(sample, dtype=float)
        except (TypeError, ValueError) as exc:
            raise DimensionMismatch(f'Sample is not a numeric vector: {exc}') from exc
        if x.ndim != 1 or x.shape[0] != self.n_features:
            raise DimensionMismatch(
                f'Sample must have {self.n_features} features, got shape {x.shape}'
            )
        return x

    def __repr__(self) -> str:
        return f'SoftmaxModel(n_classes={self.n_classes}, n_features={self.n_features})'
