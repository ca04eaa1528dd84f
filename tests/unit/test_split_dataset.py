from __future__ import annotations

import numpy as np
import pytest

from iris_softmax.data import DatasetError, split_dataset


def _dataset(n: int = 150):
    features = np.arange(n * 4, dtype=float).reshape(n, 4)
    labels = np.arange(n) % 3
    return features, labels


def test_split_sizes_use_floor_of_train_ratio():
    features, labels = _dataset(151)

    x_train, y_train, x_test, y_test = split_dataset(features, labels, train_ratio=0.8)

    assert len(x_train) == len(y_train) == 120
    assert len(x_test) == len(y_test) == 31


def test_split_keeps_rows_and_labels_together():
    features, labels = _dataset()

    x_train, y_train, x_test, y_test = split_dataset(features, labels, random_state=3)

    for x, y in zip(np.vstack([x_train, x_test]), np.concatenate([y_train, y_test])):
        assert (x[0] / 4) % 3 == y
    assert sorted(np.concatenate([x_train, x_test])[:, 0].tolist()) == features[:, 0].tolist()


def test_split_is_reproducible_with_random_state():
    features, labels = _dataset()

    first = split_dataset(features, labels, random_state=7)
    second = split_dataset(features, labels, random_state=7)

    for a, b in zip(first, second):
        np.testing.assert_array_equal(a, b)


def test_stratified_split_keeps_class_balance():
    features, labels = _dataset()

    _, y_train, _, y_test = split_dataset(features, labels, random_state=0, stratify=True)

    assert np.bincount(y_train).tolist() == [40, 40, 40]
    assert np.bincount(y_test).tolist() == [10, 10, 10]


def test_split_rejects_bad_inputs():
    features, labels = _dataset(3)

    with pytest.raises(ValueError):
        split_dataset(features, labels, train_ratio=1.5)
    with pytest.raises(DatasetError):
        split_dataset(features, labels, train_ratio=0.2)
    with pytest.raises(DatasetError):
        split_dataset(features, labels[:2])
