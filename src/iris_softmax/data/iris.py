"""Iris CSV adapter: delimited text in, feature matrix and label vector out."""

from __future__ import annotations

import io
from pathlib import Path

import numpy as np
import pandas as pd

from ..config import DataConfig
from ..utils import get_logger, json_log

log = get_logger(__name__)


class DatasetError(ValueError):
    """Raised when the CSV does not match the expected Iris schema."""


def load_iris_csv(
    csv_text: str,
    config: DataConfig | None = None,
) -> tuple[np.ndarray, np.ndarray]:
    """
    Parse headered Iris CSV text.

    The ``Id`` column and any other unlisted columns are ignored; the
    configured feature columns become floats and the species name is
    mapped to its class index.

    Args:
        csv_text: Full CSV content including the header row.
        config: Column names and label mapping. Defaults to the Iris schema.

    Returns:
        Tuple of (features, labels) with shapes (n, n_features) and (n,).

    Raises:
        DatasetError: On missing columns, non-numeric or missing values,
            an unknown species, or no data rows.
    """
    cfg = config or DataConfig()
    try:
        df = pd.read_csv(io.StringIO(csv_text))
    except pd.errors.EmptyDataError as exc:
        raise DatasetError('CSV is empty') from exc

    required = [*cfg.feature_columns, cfg.label_column]
    missing = [col for col in required if col not in df.columns]
    if missing:
        raise DatasetError(f'Missing required columns: {missing}')
    if df.empty:
        raise DatasetError('CSV has a header but no data rows')

    feature_df = df[list(cfg.feature_columns)]
    try:
        feature_df = feature_df.apply(pd.to_numeric, errors='raise')
    except (TypeError, ValueError) as exc:
        raise DatasetError(f'Non-numeric feature value: {exc}') from exc

    null_rows = feature_df.isna().any(axis=1) | df[cfg.label_column].isna()
    if null_rows.any():
        first = int(np.flatnonzero(null_rows.to_numpy())[0])
        raise DatasetError(f'Missing value in data row {first + 1}')

    species = df[cfg.label_column].astype(str)
    unknown = sorted(set(species) - set(cfg.label_mapping))
    if unknown:
        raise DatasetError(f'Unknown label(s): {unknown}')

    features = feature_df.to_numpy(dtype=float)
    labels = species.map(cfg.label_mapping).to_numpy(dtype=int)

    log.debug(
        json_log(
            'data.load.completed',
            component='data.iris',
            rows=int(features.shape[0]),
            features=int(features.shape[1]),
        )
    )
    return features, labels


def load_iris_file(
    path: str | Path,
    config: DataConfig | None = None,
) -> tuple[np.ndarray, np.ndarray]:
    """Read a CSV file from disk and parse it with ``load_iris_csv``."""
    csv_path = Path(path)
    if not csv_path.exists():
        raise FileNotFoundError(f'CSV file not found: {csv_path}')
    return load_iris_csv(csv_path.read_text(encoding='utf-8'), config)
