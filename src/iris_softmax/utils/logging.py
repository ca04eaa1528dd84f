"""Structured logging helpers.

Every module logs through a child of the ``iris_softmax`` logger, which owns
the single stdout handler. Messages are JSON lines built with ``json_log``.
"""

from __future__ import annotations

import json
import logging
import os
import sys
import time
from pathlib import Path
from typing import Any

import numpy as np

PACKAGE_LOGGER = 'iris_softmax'


def _to_jsonable(value: Any) -> Any:
    if isinstance(value, np.generic):
        return value.item()
    if isinstance(value, np.ndarray):
        return value.tolist()
    if isinstance(value, Path):
        return str(value)
    return repr(value)


def json_log(message: str, **extra: Any) -> str:
    """Return ``{"ts": ..., "msg": message, **extra}`` as one JSON line."""
    payload = {'ts': round(time.time(), 6), 'msg': message, **extra}
    return json.dumps(payload, ensure_ascii=False, default=_to_jsonable)


def _level_from_env() -> int:
    name = os.getenv('ISM_LOG_LEVEL')
    if name:
        level = logging.getLevelName(name.upper())
        if isinstance(level, int):
            return level
    return logging.DEBUG if os.getenv('ISM_DEBUG') else logging.INFO


def configure_logging(level: int | None = None) -> logging.Logger:
    """Attach the stdout handler to the package logger and set its level.

    ``ISM_LOG_LEVEL`` (a level name) wins over ``ISM_DEBUG`` when no explicit
    level is passed. Safe to call repeatedly.
    """
    root = logging.getLogger(PACKAGE_LOGGER)
    if not root.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter('%(message)s'))
        root.addHandler(handler)
        root.propagate = False
    root.setLevel(level if level is not None else _level_from_env())
    return root


def get_logger(name: str) -> logging.Logger:
    """Return a logger under the package hierarchy."""
    root = logging.getLogger(PACKAGE_LOGGER)
    if not root.handlers:
        configure_logging()
    if name == PACKAGE_LOGGER or name.startswith(f'{PACKAGE_LOGGER}.'):
        return logging.getLogger(name)
    return root.getChild(name)
