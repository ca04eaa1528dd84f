"""Unit tests for the Iris CSV adapter."""

from __future__ import annotations

import numpy as np
import pytest

from iris_softmax.config import DataConfig
from iris_softmax.data import DatasetError, load_iris_csv, load_iris_file

HEADER = 'Id,SepalLengthCm,SepalWidthCm,PetalLengthCm,PetalWidthCm,Species\n'


def test_parses_features_and_labels() -> None:
    text = (
        HEADER
        + '1,5.1,3.5,1.4,0.2,Iris-setosa\n'
        + '2,7.0,3.2,4.7,1.4,Iris-versicolor\n'
        + '3,6.3,3.3,6.0,2.5,Iris-virginica\n'
    )

    features, labels = load_iris_csv(text)

    assert features.shape == (3, 4)
    np.testing.assert_allclose(features[0], [5.1, 3.5, 1.4, 0.2])
    assert labels.tolist() == [0, 1, 2]


def test_fixture_csv_round_numbers(iris_csv_text: str) -> None:
    features, labels = load_iris_csv(iris_csv_text)

    assert features.shape == (30, 4)
    assert np.bincount(labels).tolist() == [10, 10, 10]


def test_custom_schema() -> None:
    cfg = DataConfig(feature_columns=('x',), label_column='kind', label_mapping={'a': 0, 'b': 1})

    features, labels = load_iris_csv('x,kind\n1.5,b\n-2,a\n', cfg)

    assert features.tolist() == [[1.5], [-2.0]]
    assert labels.tolist() == [1, 0]


@pytest.mark.parametrize(
    ('text', 'match'),
    [
        (HEADER + '1,5.1,3.5,1.4,0.2,Iris-unknown\n', 'Unknown label'),
        (HEADER + '1,5.1,abc,1.4,0.2,Iris-setosa\n', 'Non-numeric'),
        (HEADER + '1,5.1,,1.4,0.2,Iris-setosa\n', 'Missing value'),
        ('Id,SepalLengthCm,Species\n1,5.1,Iris-setosa\n', 'Missing required columns'),
        (HEADER, 'no data rows'),
        ('', 'empty'),
    ],
)
def test_malformed_csv_raises(text: str, match: str) -> None:
    with pytest.raises(DatasetError, match=match):
        load_iris_csv(text)


def test_load_file(iris_csv_file) -> None:
    features, labels = load_iris_file(iris_csv_file)

    assert len(features) == len(labels) == 30


def test_load_missing_file(tmp_path) -> None:
    with pytest.raises(FileNotFoundError):
        load_iris_file(tmp_path / 'missing.csv')
