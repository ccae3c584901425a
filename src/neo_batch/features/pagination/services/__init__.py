"""Pagination services."""

from .paginator import paginate

__all__ = ["paginate"]
