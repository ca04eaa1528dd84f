"""Unit tests for the structured logging helpers."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import numpy as np
import pytest

from iris_softmax.utils.logging import PACKAGE_LOGGER, configure_logging, get_logger, json_log


@pytest.fixture(autouse=True)
def _restore_level():
    root = logging.getLogger(PACKAGE_LOGGER)
    level = root.level
    yield
    root.setLevel(level)


class TestJsonLog:
    def test_payload_has_message_and_fields(self) -> None:
        payload = json.loads(json_log('train.completed', component='pipeline', rows=3))

        assert payload['msg'] == 'train.completed'
        assert payload['component'] == 'pipeline'
        assert payload['rows'] == 3
        assert isinstance(payload['ts'], float)

    def test_numpy_and_path_values_are_serialised(self) -> None:
        payload = json.loads(
            json_log(
                'x',
                accuracy=np.float64(0.5),
                count=np.int64(4),
                weights=np.array([[1.0, 2.0]]),
                path=Path('data/Iris.csv'),
            )
        )

        assert payload['accuracy'] == 0.5
        assert payload['count'] == 4
        assert payload['weights'] == [[1.0, 2.0]]
        assert payload['path'] == str(Path('data/Iris.csv'))


class TestGetLogger:
    def test_module_loggers_share_one_handler(self) -> None:
        first = get_logger('iris_softmax.pipeline.run')
        second = get_logger('iris_softmax.cli.main')
        root = logging.getLogger(PACKAGE_LOGGER)

        assert first.name == 'iris_softmax.pipeline.run'
        assert not first.handlers
        assert not second.handlers
        assert len(root.handlers) == 1
        assert root.propagate is False

    def test_foreign_name_is_nested_under_package(self) -> None:
        logger = get_logger('some_script')

        assert logger.name == f'{PACKAGE_LOGGER}.some_script'

    def test_level_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv('ISM_LOG_LEVEL', raising=False)
        monkeypatch.setenv('ISM_DEBUG', '1')
        assert configure_logging().level == logging.DEBUG

        monkeypatch.setenv('ISM_LOG_LEVEL', 'warning')
        assert configure_logging().level == logging.WARNING

        monkeypatch.delenv('ISM_DEBUG')
        monkeypatch.delenv('ISM_LOG_LEVEL')
        assert configure_logging().level == logging.INFO

    def test_explicit_level_wins(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv('ISM_LOG_LEVEL', 'warning')

        assert configure_logging(logging.ERROR).level == logging.ERROR
