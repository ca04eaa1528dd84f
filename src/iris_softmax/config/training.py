"""Config models and loaders for training and serving."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from pathlib import Path

import yaml

IRIS_FEATURE_COLUMNS: tuple[str, ...] = (
    'SepalLengthCm',
    'SepalWidthCm',
    'PetalLengthCm',
    'PetalWidthCm',
)
IRIS_LABEL_MAPPING: dict[str, int] = {
    'Iris-setosa': 0,
    'Iris-versicolor': 1,
    'Iris-virginica': 2,
}


@dataclass(frozen=True)
class DataConfig:
    path: Path | None = None
    feature_columns: tuple[str, ...] = IRIS_FEATURE_COLUMNS
    label_column: str = 'Species'
    label_mapping: dict[str, int] = field(default_factory=lambda: dict(IRIS_LABEL_MAPPING))


@dataclass(frozen=True)
class SplitConfig:
    train_ratio: float = 0.8
    random_state: int | None = None
    stratify: bool = False


@dataclass(frozen=True)
class ModelConfig:
    n_classes: int = 3


@dataclass(frozen=True)
class TrainingConfig:
    learning_rate: float = 0.1
    epochs: int = 100000


@dataclass(frozen=True)
class LoggingConfig:
    mode: str = 'minimal'  # 'minimal' or 'requests'


@dataclass(frozen=True)
class RunConfig:
    data: DataConfig = field(default_factory=DataConfig)
    split: SplitConfig = field(default_factory=SplitConfig)
    model: ModelConfig = field(default_factory=ModelConfig)
    training: TrainingConfig = field(default_factory=TrainingConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def load_training_config(config_path: str | Path) -> RunConfig:
    """Load a training config YAML file."""
    cfg_path = Path(config_path).expanduser().resolve()
    if not cfg_path.exists():
        raise FileNotFoundError(f'Config file not found: {cfg_path}')

    with cfg_path.open('r', encoding='utf-8') as fh:
        data = yaml.safe_load(fh) or {}

    return parse_run_config(data, base_dir=cfg_path.parent)


def parse_run_config(data: Mapping, base_dir: Path | None = None) -> RunConfig:
    """Build a ``RunConfig`` from an already parsed mapping."""
    base = base_dir or Path.cwd()

    data_section = data.get('data') or {}
    split_section = data.get('split') or {}
    model_section = data.get('model') or {}
    training_section = data.get('training') or {}
    logging_section = data.get('logging') or {}

    label_mapping = data_section.get('label_mapping') or IRIS_LABEL_MAPPING
    data_cfg = DataConfig(
        path=_resolve_optional_path(base, data_section.get('path')),
        feature_columns=_ensure_tuple(
            data_section.get('feature_columns', IRIS_FEATURE_COLUMNS),
        ),
        label_column=str(data_section.get('label_column', 'Species')),
        label_mapping={str(name): int(idx) for name, idx in label_mapping.items()},
    )
    if not data_cfg.feature_columns:
        raise ValueError('data.feature_columns must list at least one column')

    train_ratio = float(split_section.get('train_ratio', 0.8))
    if not 0.0 < train_ratio < 1.0:
        raise ValueError(f'split.train_ratio must be in (0, 1), got {train_ratio}')
    random_state = split_section.get('random_state')
    split = SplitConfig(
        train_ratio=train_ratio,
        random_state=int(random_state) if random_state is not None else None,
        stratify=bool(split_section.get('stratify', False)),
    )

    model = ModelConfig(n_classes=int(model_section.get('n_classes', 3)))
    if model.n_classes < 1:
        raise ValueError(f'model.n_classes must be >= 1, got {model.n_classes}')
    out_of_range = [
        name for name, idx in data_cfg.label_mapping.items()
        if not 0 <= idx < model.n_classes
    ]
    if out_of_range:
        raise ValueError(
            f'data.label_mapping entries {out_of_range} fall outside [0, {model.n_classes})'
        )

    training = TrainingConfig(
        learning_rate=float(training_section.get('learning_rate', 0.1)),
        epochs=int(training_section.get('epochs', 100000)),
    )

    mode = logging_section.get('mode', 'minimal')
    if mode not in ('minimal', 'requests'):
        raise ValueError(f"logging.mode must be 'minimal' or 'requests', got {mode!r}")

    return RunConfig(
        data=data_cfg,
        split=split,
        model=model,
        training=training,
        logging=LoggingConfig(mode=mode),
    )


def _resolve_path(base: Path, value: str | Path) -> Path:
    path = Path(value)
    if not path.is_absolute():
        path = (base / path).resolve()
    return path


def _resolve_optional_path(base: Path, value: str | Path | None) -> Path | None:
    if value is None:
        return None
    return _resolve_path(base, value)


def _ensure_tuple(items: Iterable[str] | None) -> tuple[str, ...]:
    if not items:
        return tuple()
    return tuple(str(item) for item in items)
