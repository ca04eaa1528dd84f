"""Softmax logistic regression for the Iris dataset."""

from .core import (
    DimensionMismatch,
    EmptyDataset,
    InvalidParameter,
    PredictionResult,
    SoftmaxModel,
    SoftmaxRegressionError,
    SoftmaxTrainer,
    fit,
    predict,
)

__all__ = [
    'DimensionMismatch',
    'EmptyDataset',
    'InvalidParameter',
    'PredictionResult',
    'SoftmaxModel',
    'SoftmaxRegressionError',
    'SoftmaxTrainer',
    'fit',
    'predict',
]

__version__ = '0.1.0'
