"""Full-batch gradient descent on the multinomial cross-entropy loss."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np

from .errors import DimensionMismatch, EmptyDataset, InvalidParameter
from .model import SoftmaxModel
from .numeric import softmax

DEFAULT_N_CLASSES = 3


@dataclass(frozen=True)
class TrainerConfig:
    """Options fixed at trainer construction.

    ``n_classes`` sets the output dimensionality of weights, bias and scores.
    """

    n_classes: int = DEFAULT_N_CLASSES

    def __post_init__(self) -> None:
        if isinstance(self.n_classes, bool) or not isinstance(self.n_classes, int | np.integer):
            raise InvalidParameter(f'n_classes must be an integer, got {self.n_classes!r}')
        if self.n_classes < 1:
            raise InvalidParameter(f'n_classes must be >= 1, got {self.n_classes}')


@dataclass(frozen=True)
class PredictionResult:
    """Predicted class index and the full probability vector."""

    class_index: int
    probabilities: tuple[float, ...]


class SoftmaxTrainer:
    """Fits a ``SoftmaxModel`` with vanilla batch gradient descent."""

    def __init__(self, config: TrainerConfig | None = None) -> None:
        self.config = config or TrainerConfig()

    @property
    def n_classes(self) -> int:
        return self.config.n_classes

    def fit(
        self,
        features: Sequence[Sequence[float]] | np.ndarray,
        labels: Sequence[int] | np.ndarray,
        learning_rate: float,
        epochs: int,
    ) -> SoftmaxModel:
        """
        Train a fresh model on the whole dataset.

        Every epoch computes the average softmax cross-entropy gradient over
        all samples and takes one step. There is no shuffling, so the result
        does not depend on sample order beyond floating-point summation.

        Args:
            features: Matrix of shape (n_samples, n_features).
            labels: Class index per sample, each in [0, n_classes).
            learning_rate: Step size, must be > 0.
            epochs: Number of full passes, must be >= 0.

        Returns:
            The fitted model. With ``epochs=0`` all parameters are zero.

        Raises:
            InvalidParameter: On a bad learning rate or epoch count.
            EmptyDataset: If there are no samples.
            DimensionMismatch: On ragged rows, mismatched lengths or
                out-of-range labels.
        """
        _check_hyperparameters(learning_rate, epochs)
        x = _as_feature_matrix(features)
        y = _as_label_vector(labels, n_samples=x.shape[0], n_classes=self.n_classes)

        n_samples, n_features = x.shape
        model = SoftmaxModel(self.n_classes, n_features)
        targets = np.eye(self.n_classes)[y]

        for _ in range(epochs):
            probs = softmax(model.batch_scores(x))
            # d(loss)/d(logit_k) = p_k - 1[label == k]
            errors = probs - targets
            dw = errors.T @ x
            db = errors.sum(axis=0)
            model._apply_gradients(dw, db, learning_rate, n_samples)

        return model


def fit(
    features: Sequence[Sequence[float]] | np.ndarray,
    labels: Sequence[int] | np.ndarray,
    learning_rate: float,
    epochs: int,
    n_classes: int = DEFAULT_N_CLASSES,
) -> SoftmaxModel:
    """Train a model with a one-off ``SoftmaxTrainer``."""
    trainer = SoftmaxTrainer(TrainerConfig(n_classes=n_classes))
    return trainer.fit(features, labels, learning_rate, epochs)


def predict(model: SoftmaxModel, sample: Sequence[float] | np.ndarray) -> PredictionResult:
    """Classify one sample and return its probability vector."""
    probs = model.predict_proba(sample)
    return PredictionResult(
        class_index=int(np.argmax(probs)),
        probabilities=tuple(float(p) for p in probs),
    )


def predict_batch(
    model: SoftmaxModel,
    features: Sequence[Sequence[float]] | np.ndarray,
) -> np.ndarray:
    """Class index for every row of ``features``."""
    x = _as_feature_matrix(features, allow_empty=True)
    if x.shape[0] == 0:
        return np.empty(0, dtype=int)
    if x.shape[1] != model.n_features:
        raise DimensionMismatch(
            f'Samples must have {model.n_features} features, got {x.shape[1]}'
        )
    return np.argmax(softmax(model.batch_scores(x)), axis=1)


def _check_hyperparameters(learning_rate: float, epochs: int) -> None:
    if isinstance(learning_rate, bool) or not isinstance(
        learning_rate, int | float | np.integer | np.floating
    ):
        raise InvalidParameter(f'learning_rate must be a real number, got {learning_rate!r}')
    if not math.isfinite(learning_rate) or learning_rate <= 0:
        raise InvalidParameter(f'learning_rate must be finite and > 0, got {learning_rate}')
    if isinstance(epochs, bool) or not isinstance(epochs, int | np.integer):
        raise InvalidParameter(f'epochs must be an integer, got {epochs!r}')
    if epochs < 0:
        raise InvalidParameter(f'epochs must be >= 0, got {epochs}')


def _as_feature_matrix(
    features: Sequence[Sequence[float]] | np.ndarray,
    allow_empty: bool = False,
) -> np.ndarray:
    if len(features) == 0:
        if allow_empty:
            return np.empty((0, 0), dtype=float)
        raise EmptyDataset('Cannot fit on zero samples')
    try:
        x = np.asarray(features, dtype=float)
    except ValueError as exc:
        # ragged rows and non-numeric cells both end up here
        raise DimensionMismatch(
            f'Features must be a numeric matrix with equal-length rows: {exc}'
        ) from exc
    if x.ndim != 2:
        raise DimensionMismatch(f'Features must be a 2-D matrix, got shape {x.shape}')
    if x.shape[1] == 0:
        raise DimensionMismatch('Samples must have at least one feature')
    return x


def _as_label_vector(
    labels: Sequence[int] | np.ndarray,
    n_samples: int,
    n_classes: int,
) -> np.ndarray:
    y = np.asarray(labels)
    if y.ndim != 1 or y.shape[0] != n_samples:
        raise DimensionMismatch(
            f'Expected {n_samples} labels to match the features, got shape {y.shape}'
        )
    if np.issubdtype(y.dtype, np.floating):
        if not np.all(np.isfinite(y)) or not np.all(y == np.round(y)):
            raise DimensionMismatch('Labels must be integer class indices')
        y = y.astype(int)
    elif not np.issubdtype(y.dtype, np.integer):
        raise DimensionMismatch(f'Labels must be integer class indices, got dtype {y.dtype}')

    out_of_range = (y < 0) | (y >= n_classes)
    if np.any(out_of_range):
        bad = y[out_of_range][0]
        raise DimensionMismatch(f'Label {bad} is outside [0, {n_classes})')
    return y
