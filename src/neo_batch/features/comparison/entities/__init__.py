"""Comparison entities."""

from .keyed_comparison import KeyedComparison

__all__ = ["KeyedComparison"]
