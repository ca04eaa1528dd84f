"""End-to-end run: CSV text to a fitted model and a test accuracy string."""

from __future__ import annotations

import time
from dataclasses import dataclass, replace
from pathlib import Path

import numpy as np

from ..config import RunConfig
from ..core import SoftmaxModel, SoftmaxTrainer, TrainerConfig, predict_batch
from ..data import load_iris_csv, split_dataset
from ..evaluation import compute_accuracy, format_accuracy
from ..utils import get_logger, json_log

log = get_logger(__name__)


@dataclass(frozen=True)
class RunResult:
    """Fitted model plus the held-out evaluation."""

    model: SoftmaxModel
    accuracy: float
    n_train: int
    n_test: int
    elapsed_ms: float

    @property
    def summary(self) -> str:
        return format_accuracy(self.accuracy)


def apply_training_overrides(
    config: RunConfig,
    learning_rate: float | None = None,
    epochs: int | None = None,
) -> RunConfig:
    """Return a copy of ``config`` with any given training values replaced."""
    overrides: dict[str, float | int] = {}
    if learning_rate is not None:
        overrides['learning_rate'] = learning_rate
    if epochs is not None:
        overrides['epochs'] = epochs
    if not overrides:
        return config
    return replace(config, training=replace(config.training, **overrides))


def train_and_evaluate(csv_text: str, config: RunConfig | None = None) -> RunResult:
    """
    Load, split, fit and score the held-out part.

    Args:
        csv_text: Iris CSV content with header.
        config: Run configuration. Defaults to ``RunConfig()``.

    Returns:
        RunResult with the fitted model and test accuracy.
    """
    cfg = config or RunConfig()
    start = time.perf_counter()

    features, labels = load_iris_csv(csv_text, cfg.data)
    x_train, y_train, x_test, y_test = split_dataset(
        features,
        labels,
        train_ratio=cfg.split.train_ratio,
        random_state=cfg.split.random_state,
        stratify=cfg.split.stratify,
    )

    log.info(
        json_log(
            'pipeline.train.start',
            component='pipeline.run',
            train_rows=int(len(y_train)),
            test_rows=int(len(y_test)),
            learning_rate=cfg.training.learning_rate,
            epochs=cfg.training.epochs,
            n_classes=cfg.model.n_classes,
        )
    )

    trainer = SoftmaxTrainer(TrainerConfig(n_classes=cfg.model.n_classes))
    model = trainer.fit(
        x_train,
        y_train,
        learning_rate=cfg.training.learning_rate,
        epochs=cfg.training.epochs,
    )
    predictions = predict_batch(model, x_test)
    accuracy = compute_accuracy(predictions, y_test)
    elapsed_ms = (time.perf_counter() - start) * 1000

    log.info(
        json_log(
            'pipeline.train.completed',
            component='pipeline.run',
            accuracy=accuracy,
            elapsed_ms=round(elapsed_ms, 2),
        )
    )

    return RunResult(
        model=model,
        accuracy=accuracy,
        n_train=int(len(y_train)),
        n_test=int(len(y_test)),
        elapsed_ms=elapsed_ms,
    )


def run(csv_text: str, config: RunConfig | None = None) -> str:
    """Train on a random split and return ``'Test Accuracy: <pct>%'``."""
    return train_and_evaluate(csv_text, config).summary


def train_from_file(path: str | Path, config: RunConfig | None = None) -> RunResult:
    csv_path = Path(path)
    if not csv_path.exists():
        raise FileNotFoundError(f'CSV file not found: {csv_path}')
    return train_and_evaluate(csv_path.read_text(encoding='utf-8'), config)


def train_full(csv_text: str, config: RunConfig | None = None) -> SoftmaxModel:
    """Fit on every row without holding any out."""
    cfg = config or RunConfig()
    features, labels = load_iris_csv(csv_text, cfg.data)
    trainer = SoftmaxTrainer(TrainerConfig(n_classes=cfg.model.n_classes))
    model = trainer.fit(
        features,
        labels,
        learning_rate=cfg.training.learning_rate,
        epochs=cfg.training.epochs,
    )
    log.info(
        json_log(
            'pipeline.train_full.completed',
            component='pipeline.run',
            rows=int(len(labels)),
            classes=int(np.unique(labels).size),
        )
    )
    return model
