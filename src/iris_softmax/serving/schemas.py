"""Pydantic request/response schemas for the serving API."""

from __future__ import annotations

from pydantic import BaseModel, Field


class PredictRequest(BaseModel):
    """Request schema for a single sample."""

    features: list[float] = Field(
        ...,
        min_length=1,
        description='Feature values in configured column order.',
        examples=[[5.1, 3.5, 1.4, 0.2]],
    )


class BatchPredictRequest(BaseModel):
    """Request schema for several samples."""

    samples: list[list[float]] = Field(
        ...,
        min_length=1,
        max_length=100,
        description='List of feature vectors (1 to 100 samples).',
    )


class PredictResponse(BaseModel):
    """Predicted class with its full probability vector."""

    class_index: int = Field(..., ge=0, description='Index of the most probable class.')
    label: str = Field(..., description='Class name from the label mapping.')
    probabilities: list[float] = Field(
        ...,
        description='Probability per class index; sums to 1.',
    )


class BatchPredictResponse(BaseModel):
    predictions: list[PredictResponse]


class HealthResponse(BaseModel):
    """Response schema for health check endpoint."""

    status: str = Field(default='ok', description='Service health status.')


class ReadyResponse(BaseModel):
    """Response schema for readiness check endpoint."""

    status: str = Field(..., description='Readiness status.')
    model_loaded: bool = Field(..., description='Whether a fitted model is available.')


class ModelInfoResponse(BaseModel):
    """Response schema for model information endpoint."""

    n_classes: int = Field(..., description='Number of output classes.')
    n_features: int = Field(..., description='Number of input features.')
    feature_columns: list[str] = Field(..., description='Expected feature order.')
    label_mapping: dict[str, int] = Field(..., description='Label to integer mapping.')
    learning_rate: float = Field(..., description='Learning rate used for fitting.')
    epochs: int = Field(..., description='Number of epochs used for fitting.')
    test_accuracy: float = Field(..., ge=0.0, le=1.0, description='Held-out accuracy.')
    weights: list[list[float]] = Field(..., description='Weight matrix, one row per class.')
    bias: list[float] = Field(..., description='Bias per class.')


class ErrorResponse(BaseModel):
    """Response schema for error responses."""

    detail: str = Field(..., description='Error message.')
