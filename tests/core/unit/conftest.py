"""Shared fixtures for mock responder core unit tests."""

from __future__ import annotations

from typing import Callable

import httpx
import pytest

from mockresponder.factories import new_mock_responder
from mockresponder.usecases.registry import MockResponder
from tests.core.unit.fakes import FakeLoggingAdapter

RequestBuilder = Callable[..., httpx.Request]


@pytest.fixture
def fake_logger() -> FakeLoggingAdapter:
    """Capture responder log output."""
    return FakeLoggingAdapter()


@pytest.fixture
def ctx_request(
    fake_logger: FakeLoggingAdapter,
) -> tuple[MockResponder, RequestBuilder]:
    """Create a responder and a builder for requests carrying its context.

    Returns:
        Tuple of (responder, build) where build(url, method="GET") returns an
        httpx.Request with the responder attached to its extensions.
    """
    responder, ctx = new_mock_responder(logger=fake_logger)

    def build(url: str, method: str = "GET") -> httpx.Request:
        return httpx.Request(method, url, extensions=ctx)

    return responder, build
