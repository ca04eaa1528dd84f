"""Data loading and splitting for iris_softmax."""

from .iris import DatasetError, load_iris_csv, load_iris_file
from .split import split_dataset

__all__ = [
    'DatasetError',
    'load_iris_csv',
    'load_iris_file',
    'split_dataset',
]
