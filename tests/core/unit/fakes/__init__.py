"""Fake adapters for testing."""

from .fake_logging_adapter import FakeLoggingAdapter

__all__ = [
    "FakeLoggingAdapter",
]
