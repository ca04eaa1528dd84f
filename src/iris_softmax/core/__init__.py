"""Training and prediction core. Performs no I/O and no logging."""

from .errors import DimensionMismatch, EmptyDataset, InvalidParameter, SoftmaxRegressionError
from .model import SoftmaxModel
from .numeric import dot, softmax
from .trainer import (
    DEFAULT_N_CLASSES,
    PredictionResult,
    SoftmaxTrainer,
    TrainerConfig,
    fit,
    predict,
    predict_batch,
)

__all__ = [
    'DEFAULT_N_CLASSES',
    'DimensionMismatch',
    'EmptyDataset',
    'InvalidParameter',
    'PredictionResult',
    'SoftmaxModel',
    'SoftmaxRegressionError',
    'SoftmaxTrainer',
    'TrainerConfig',
    'dot',
    'fit',
    'predict',
    'predict_batch',
    'softmax',
]
