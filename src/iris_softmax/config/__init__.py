"""Configuration utilities for iris_softmax."""

from .training import (
    IRIS_FEATURE_COLUMNS,
    IRIS_LABEL_MAPPING,
    DataConfig,
    LoggingConfig,
    ModelConfig,
    RunConfig,
    SplitConfig,
    TrainingConfig,
    load_training_config,
    parse_run_config,
)

__all__ = [
    'IRIS_FEATURE_COLUMNS',
    'IRIS_LABEL_MAPPING',
    'DataConfig',
    'LoggingConfig',
    'ModelConfig',
    'RunConfig',
    'SplitConfig',
    'TrainingConfig',
    'load_training_config',
    'parse_run_config',
]
