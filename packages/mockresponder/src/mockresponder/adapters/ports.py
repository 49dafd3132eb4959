"""Port interfaces for the mock responder package.

Ports define the contracts that adapters must implement.
These are Protocol classes (structural subtyping) for flexible testing.
"""

from __future__ import annotations

from typing import Callable, Protocol, runtime_checkable

import httpx

DispatchFunc = Callable[[httpx.Request], httpx.Response]
"""Signature of a dispatch strategy: takes a request, returns a response or raises."""


@runtime_checkable
class DispatcherPort(Protocol):
    """Port interface for executing an HTTP request.

    Same call shape as an httpx transport, so a MockResponder can stand in
    wherever application code expects something that turns a request into
    a response.

    Contract:
        - handle_request() returns an httpx.Response for the request
        - May raise the configured data-level error instead of returning
        - May raise FixtureError subclasses when the test is misconfigured
    """

    def handle_request(self, request: httpx.Request) -> httpx.Response:
        """Execute the request.

        Args:
            request: The outgoing httpx request.

        Returns:
            The response for the request.
        """
        ...


@runtime_checkable
class LoggingPort(Protocol):
    """Port interface for diagnostic logging.

    Implementations handle log message delivery to configured logging backends.
    Injected into the responder at construction so dispatch output can be
    captured in tests instead of going to a fixed global sink.

    Contract:
        - debug(), info() and error() log a message at that level
        - Calls are fire-and-forget (no return value, no exceptions propagated)
        - Thread safety is implementation-defined
    """

    def debug(self, message: str) -> None:
        """Log a debug message."""
        ...

    def info(self, message: str) -> None:
        """Log an info message."""
        ...

    def error(self, message: str) -> None:
        """Log an error message."""
        ...
