"""Shared pytest fixtures and markers for all tests."""

from datetime import datetime

import pytest


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )


FIXED_TIME = datetime(2024, 5, 17, 9, 5, 3)


@pytest.fixture
def fixed_time():
    """Timestamp returned by the clock of worlds built with make_world."""
    return FIXED_TIME


@pytest.fixture
def memory_sink():
    """Provide an empty in-memory log sink."""
    from expedition.journal import MemorySink
    return MemorySink()


@pytest.fixture
def make_world(memory_sink):
    """Factory for a World wired to the memory sink and a fixed clock."""
    from expedition.models.world import WeatherState, World

    def _make(rng, weather=WeatherState.CLEAR, forecast=("clear", "wind", "sandstorm")):
        return World(memory_sink, rng, weather=weather, forecast=forecast, clock=lambda: FIXED_TIME)

    return _make
