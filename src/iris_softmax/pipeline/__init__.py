"""Pipeline orchestration."""

from .run import (
    RunResult,
    apply_training_overrides,
    run,
    train_and_evaluate,
    train_from_file,
    train_full,
)

__all__ = [
    'RunResult',
    'apply_training_overrides',
    'run',
    'train_and_evaluate',
    'train_from_file',
    'train_full',
]
