"""FastAPI application serving Iris predictions."""

from __future__ import annotations

import os
import time
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, HTTPException
from fastapi.concurrency import run_in_threadpool

from ..config import RunConfig, load_training_config
from ..core import PredictionResult, SoftmaxRegressionError, predict
from ..pipeline import RunResult, train_from_file
from ..utils import get_logger, json_log
from .schemas import (
    BatchPredictRequest,
    BatchPredictResponse,
    ErrorResponse,
    HealthResponse,
    ModelInfoResponse,
    PredictRequest,
    PredictResponse,
    ReadyResponse,
)

# Global state
_result: RunResult | None = None
_config: RunConfig | None = None

log = get_logger(__name__)


def _get_config_path() -> Path:
    """Get the config path from environment or default."""
    return Path(os.getenv('ISM_CONFIG', 'configs/training.yaml'))


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Fit the model on startup, off the event loop."""
    global _result, _config

    config_path = _get_config_path()
    log.info(
        json_log(
            'serving.startup',
            component='serving.app',
            config_path=str(config_path),
        )
    )

    try:
        _config = load_training_config(config_path)
        if _config.data.path is None:
            raise ValueError('data.path must be set to serve predictions')
        _result = await run_in_threadpool(train_from_file, _config.data.path, _config)

        log.info(
            json_log(
                'serving.ready',
                component='serving.app',
                accuracy=_result.accuracy,
                elapsed_ms=round(_result.elapsed_ms, 2),
            )
        )
    except (FileNotFoundError, ValueError) as exc:
        log.error(
            json_log(
                'serving.startup_error',
                component='serving.app',
                error=str(exc),
            )
        )
        raise

    yield

    _result = None
    log.info(json_log('serving.shutdown', component='serving.app'))


app = FastAPI(
    title='Iris Softmax API',
    description='Softmax logistic regression on the Iris dataset.',
    version='0.1.0',
    lifespan=lifespan,
)


def _log_request(endpoint: str, n_samples: int, latency_ms: float) -> None:
    """Log request if request logging is enabled."""
    if _config and _config.logging.mode == 'requests':
        log.info(
            json_log(
                'serving.request',
                component='serving.app',
                endpoint=endpoint,
                n_samples=n_samples,
                latency_ms=round(latency_ms, 2),
            )
        )


def _to_response(result: PredictionResult, config: RunConfig) -> PredictResponse:
    names = {idx: name for name, idx in config.data.label_mapping.items()}
    return PredictResponse(
        class_index=result.class_index,
        label=names.get(result.class_index, str(result.class_index)),
        probabilities=list(result.probabilities),
    )


@app.get('/health', response_model=HealthResponse, tags=['Health'])
def health() -> HealthResponse:
    """Liveness check endpoint."""
    return HealthResponse(status='ok')


@app.get('/ready', response_model=ReadyResponse, tags=['Health'])
def ready() -> ReadyResponse:
    """Readiness check endpoint."""
    model_loaded = _result is not None
    status = 'ready' if model_loaded else 'not_ready'
    return ReadyResponse(status=status, model_loaded=model_loaded)


@app.get('/model/info', response_model=ModelInfoResponse, tags=['Model'])
def model_info() -> ModelInfoResponse:
    """Get information about the fitted model."""
    if _result is None or _config is None:
        raise HTTPException(status_code=503, detail='Model not loaded')

    params = _result.model.to_dict()
    return ModelInfoResponse(
        n_classes=params['n_classes'],
        n_features=params['n_features'],
        feature_columns=list(_config.data.feature_columns),
        label_mapping=_config.data.label_mapping,
        learning_rate=_config.training.learning_rate,
        epochs=_config.training.epochs,
        test_accuracy=_result.accuracy,
        weights=params['weights'],
        bias=params['bias'],
    )


@app.post(
    '/predict',
    response_model=PredictResponse,
    responses={400: {'model': ErrorResponse}, 503: {'model': ErrorResponse}},
    tags=['Prediction'],
)
def predict_endpoint(request: PredictRequest) -> PredictResponse:
    """Classify a single sample."""
    if _result is None or _config is None:
        raise HTTPException(status_code=503, detail='Model not loaded')

    start_time = time.perf_counter()
    try:
        result = predict(_result.model, request.features)
    except SoftmaxRegressionError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc

    latency_ms = (time.perf_counter() - start_time) * 1000
    _log_request('/predict', 1, latency_ms)
    return _to_response(result, _config)


@app.post(
    '/predict/batch',
    response_model=BatchPredictResponse,
    responses={400: {'model': ErrorResponse}, 503: {'model': ErrorResponse}},
    tags=['Prediction'],
)
def predict_batch_endpoint(request: BatchPredictRequest) -> BatchPredictResponse:
    """Classify several samples."""
    if _result is None or _config is None:
        raise HTTPException(status_code=503, detail='Model not loaded')

    start_time = time.perf_counter()
    predictions = []
    for i, sample in enumerate(request.samples):
        try:
            result = predict(_result.model, sample)
        except SoftmaxRegressionError as exc:
            raise HTTPException(
                status_code=400,
                detail=f'Sample at index {i}: {exc}',
            ) from exc
        predictions.append(_to_response(result, _config))

    latency_ms = (time.perf_counter() - start_time) * 1000
    _log_request('/predict/batch', len(request.samples), latency_ms)
    return BatchPredictResponse(predictions=predictions)
