"""Evaluation helpers."""

from .metrics import compute_accuracy, format_accuracy

__all__ = ['compute_accuracy', 'format_accuracy']
