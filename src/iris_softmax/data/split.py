"""Train/test splitting."""

from __future__ import annotations

import math

import numpy as np
from sklearn.model_selection import train_test_split

from .iris import DatasetError


def split_dataset(
    features: np.ndarray,
    labels: np.ndarray,
    train_ratio: float = 0.8,
    random_state: int | None = None,
    stratify: bool = False,
) -> tuple[np.ndarray, np.ndarray, np.ndarray, np.ndarray]:
    """
    Shuffle and split into train and test parts.

    The train part gets ``floor(n * train_ratio)`` rows and the test part
    the rest. ``random_state=None`` draws a fresh shuffle on every call.

    Returns:
        Tuple of (train_features, train_labels, test_features, test_labels).
    """
    if not 0.0 < train_ratio < 1.0:
        raise ValueError(f'train_ratio must be in (0, 1), got {train_ratio}')
    n_samples = len(features)
    if len(labels) != n_samples:
        raise DatasetError(f'Got {n_samples} feature rows but {len(labels)} labels')

    n_train = math.floor(n_samples * train_ratio)
    n_test = n_samples - n_train
    if n_train < 1 or n_test < 1:
        raise DatasetError(
            f'{n_samples} rows cannot be split with train_ratio={train_ratio}'
        )

    x_train, x_test, y_train, y_test = train_test_split(
        features,
        labels,
        train_size=n_train,
        test_size=n_test,
        random_state=random_state,
        shuffle=True,
        stratify=labels if stratify else None,
    )
    return x_train, y_train, x_test, y_test
