"""Batching entities."""

from .page_span import PageSpan

__all__ = ["PageSpan"]
