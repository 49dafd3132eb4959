"""HTTPX transport adapters backed by a MockResponder.

Plug these into ``httpx.Client(transport=...)`` or
``httpx.AsyncClient(transport=...)`` so application code built on httpx is
served from the responder instead of the network.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import httpx

if TYPE_CHECKING:
    from mockresponder.usecases.registry import MockResponder


class MockTransport(httpx.BaseTransport):
    """Synchronous httpx transport serving responses from a MockResponder.

    The responder is passed explicitly and bound to each request, so callers
    do not need to thread the context carrier through their own code. A
    carrier already present on the request is left untouched.
    """

    def __init__(self, responder: MockResponder) -> None:
        """Initialize the transport.

        Args:
            responder: Responder to serve requests from.
        """
        self._responder = responder

    @property
    def responder(self) -> MockResponder:
        """Return the responder requests are served from."""
        return self._responder

    def handle_request(self, request: httpx.Request) -> httpx.Response:
        """Serve the request from the responder.

        Reads the request body first, as a real transport would.

        Raises:
            The matched descriptor's error, if configured.
            FixtureError: If the test fixture is misconfigured.
        """
        request.read()
        self._responder.bind(request)
        return self._responder.handle_request(request)


class AsyncMockTransport(httpx.AsyncBaseTransport):
    """Asynchronous httpx transport serving responses from a MockResponder.

    Dispatch itself is synchronous and never suspends while the responder
    lock is held.
    """

    def __init__(self, responder: MockResponder) -> None:
        """Initialize the transport.

        Args:
            responder: Responder to serve requests from.
        """
        self._responder = responder

    @property
    def responder(self) -> MockResponder:
        """Return the responder requests are served from."""
        return self._responder

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        """Serve the request from the responder.

        Raises:
            The matched descriptor's error, if configured.
            FixtureError: If the test fixture is misconfigured.
        """
        await request.aread()
        self._responder.bind(request)
        return self._responder.handle_request(request)
