"""Shared utilities."""

from .logging import configure_logging, get_logger, json_log

__all__ = ['configure_logging', 'get_logger', 'json_log']
