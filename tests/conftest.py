"""Pytest configuration and fixtures for neo-batch tests."""

import asyncio
from typing import Any, List, Tuple
from unittest.mock import AsyncMock

import pytest

from neo_batch.config import get_settings


class ConcurrencyProbe:
    """Records start/end events and the peak number of in-flight operations."""

    def __init__(self):
        self.in_flight = 0
        self.peak = 0
        self.events: List[Tuple[str, Any]] = []

    async def run(self, key: Any, delay: float, result: Any) -> Any:
        self.in_flight += 1
        self.peak = max(self.peak, self.in_flight)
        self.events.append(("start", key))
        try:
            await asyncio.sleep(delay)
        finally:
            self.in_flight -= 1
            self.events.append(("end", key))
        return result

    def position(self, kind: str, key: Any) -> int:
        return self.events.index((kind, key))


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Drop cached settings so env overrides apply per test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def probe():
    """Concurrency probe for scheduler tests."""
    return ConcurrencyProbe()


@pytest.fixture
def range_page_reader():
    """Page reader returning the record offsets it was asked for."""
    return AsyncMock(side_effect=lambda offset, limit: list(range(offset, offset + limit)))


@pytest.fixture
def sum_processor():
    """Chunk processor summing its chunk."""
    return AsyncMock(side_effect=lambda chunk: sum(chunk))
