"""Shared test fixtures for typetrainer tests."""

from queue import Queue

import pytest


class FakeClock:
    """Manually advanced nanosecond clock."""

    def __init__(self, start_ns: int = 1_000_000_000):
        self.now_ns = start_ns

    def __call__(self) -> int:
        return self.now_ns

    def advance(self, seconds: float) -> None:
        self.now_ns += int(seconds * 1e9)


@pytest.fixture
def event_queue():
    """Create event queue for testing."""
    return Queue(maxsize=100)


@pytest.fixture
def clock():
    """Fake monotonic clock."""
    return FakeClock()


@pytest.fixture
def config_file(tmp_path):
    """Write a ~/.ttrc style config file and return its path."""

    def _write(content: str):
        path = tmp_path / ".ttrc"
        path.write_text(content, encoding="utf-8")
        return path

    return _write
