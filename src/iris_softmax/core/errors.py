"""Error taxonomy for the training/prediction core."""

from __future__ import annotations


class SoftmaxRegressionError(ValueError):
    """Base class for errors raised by the core."""


class DimensionMismatch(SoftmaxRegressionError):
    """Raised when features, labels, parameters or a query sample disagree in shape."""


class EmptyDataset(DimensionMismatch):
    """Raised when ``fit`` receives zero samples."""


class InvalidParameter(SoftmaxRegressionError):
    """Raised for a non-positive learning rate, negative epochs or ``n_classes < 1``."""
