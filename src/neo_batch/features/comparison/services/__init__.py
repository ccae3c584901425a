"""Comparison services."""

from .key_comparator import compare_by_key

__all__ = ["compare_by_key"]
