"""MockResponder use case: the mock response registry.

Holds an ordered list of MockResponse descriptors and serves each incoming
request from the first unserved descriptor that matches it, either
positionally (no URL pattern) or by regex search on the request URL. Each
descriptor is served at most once.
"""

from __future__ import annotations

import re
import threading
from typing import Any

import httpx

from mockresponder.adapters.logging_adapter import StdlibLoggingAdapter
from mockresponder.adapters.ports import DispatchFunc, LoggingPort
from mockresponder.domain.descriptor import MockResponse, MockResponseList
from mockresponder.domain.exceptions import (
    InvalidContextError,
    InvalidPatternError,
    MissingContextError,
    NullResponderError,
    RegistryExhaustedError,
)
from mockresponder.domain.settings import DEFAULT_CONTEXT_KEY, ResponderSettings
from mockresponder.usecases.request_context import (
    RequestContext,
    bind_responder,
    new_request_context,
)
from mockresponder.usecases.url_sanitizer import sanitize_url

_DUMP_SEPARATOR = "**********"


def responder_from_request(
    request: httpx.Request, context_key: str = DEFAULT_CONTEXT_KEY
) -> MockResponder:
    """Recover the MockResponder attached to a request.

    This is the only place the context carrier is read.

    Args:
        request: Request whose extensions carry the responder.
        context_key: Extensions key the responder is stored under.

    Returns:
        The attached MockResponder.

    Raises:
        MissingContextError: If the key is absent.
        NullResponderError: If the key holds None.
        InvalidContextError: If the key holds anything but a MockResponder.
    """
    if context_key not in request.extensions:
        raise MissingContextError(context_key)

    value: Any = request.extensions[context_key]
    if value is None:
        raise NullResponderError(context_key)
    if not isinstance(value, MockResponder):
        raise InvalidContextError(context_key, value)

    return value


class ContextDispatch:
    """Default dispatch strategy.

    Resolves the responder from the request context and lets it serve the
    request from its descriptor list.
    """

    def __init__(self, context_key: str = DEFAULT_CONTEXT_KEY) -> None:
        self._context_key = context_key

    @property
    def context_key(self) -> str:
        return self._context_key

    def __call__(self, request: httpx.Request) -> httpx.Response:
        responder = responder_from_request(request, self._context_key)
        return responder.serve(request)

    def __repr__(self) -> str:
        return f"ContextDispatch(context_key={self._context_key!r})"


default_dispatch = ContextDispatch()


class MockResponder:
    """Serves mock responses in place of real HTTP calls.

    Matching rules, applied in list order on each dispatch:
        - Served descriptors are skipped.
        - A descriptor with a URL pattern matches when re.search finds the
          pattern in the rendered request URL.
        - A descriptor without a URL pattern matches any request.

    The first match is marked served and becomes "last served". Its error is
    raised if set, otherwise an httpx.Response is built from its status code
    and body.

    Thread safety:
        One lock is held for the full dispatch, so only one request is
        matched at a time and no descriptor is ever served twice. reset(),
        set_data() and the accessors take the same (reentrant) lock, so a
        custom dispatch function may call back into them.
        serve() takes the lock of the responder that owns the descriptors,
        so a request carrying another responder's context is still
        serialized against that responder.

    Example:
        responder, ctx = new_mock_responder()
        responder.set_data([
            MockResponse(url="auth$", error=httpx.ConnectError("refused")),
            MockResponse(url="ok$", body=b"OK"),
            MockResponse(body=b"BLA"),
        ])
        client = httpx.Client(transport=MockTransport(responder))
        assert client.get("http://api/ok").content == b"OK"
    """

    def __init__(
        self,
        settings: ResponderSettings | None = None,
        logger: LoggingPort | None = None,
        dispatch_func: DispatchFunc | None = None,
    ) -> None:
        """Initialize an empty responder.

        Args:
            settings: Responder configuration. Defaults to ResponderSettings().
            logger: Logging port for dispatch diagnostics. Defaults to the
                    "mockresponder" stdlib logger.
            dispatch_func: Dispatch strategy. Defaults to ContextDispatch
                           using the configured context key.
        """
        self._settings = settings or ResponderSettings()
        self._logger: LoggingPort = logger or StdlibLoggingAdapter()
        if dispatch_func is None:
            dispatch_func = (
                default_dispatch
                if self._settings.context_key == DEFAULT_CONTEXT_KEY
                else ContextDispatch(self._settings.context_key)
            )
        self._dispatch_func: DispatchFunc = dispatch_func
        self._data: MockResponseList = []
        self._last_served = 0
        self._lock = threading.RLock()

    @property
    def settings(self) -> ResponderSettings:
        """Return the responder configuration."""
        return self._settings

    @property
    def dispatch_func(self) -> DispatchFunc:
        """Return the active dispatch strategy."""
        return self._dispatch_func

    @property
    def last_served(self) -> int:
        """Index of the most recently served descriptor (0 before any dispatch)."""
        return self._last_served

    def set_dispatch_func(self, dispatch_func: DispatchFunc) -> None:
        """Replace the dispatch strategy.

        The replacement must have the same call shape: take an httpx.Request,
        return an httpx.Response or raise. It still runs under the lock.

        Args:
            dispatch_func: The new strategy.
        """
        self._dispatch_func = dispatch_func

    def context(self) -> RequestContext:
        """Return a new carrier holding this responder under the configured key."""
        return new_request_context(self, self._settings.context_key)

    def bind(self, request: httpx.Request) -> None:
        """Attach this responder to a request that carries none yet."""
        bind_responder(request, self, self._settings.context_key)

    def handle_request(self, request: httpx.Request) -> httpx.Response:
        """Dispatch a request, one at a time.

        Args:
            request: The outgoing request.

        Returns:
            The response produced by the dispatch strategy.

        Raises:
            The matched descriptor's error, if configured.
            FixtureError: If the test fixture is misconfigured.
        """
        with self._lock:
            return self._dispatch_func(request)

    dispatch = handle_request

    def serve(self, request: httpx.Request) -> httpx.Response:
        """Serve a request from the descriptor list.

        Takes this responder's own lock, so a request dispatched through
        another responder still consumes descriptors one at a time.

        Args:
            request: The outgoing request.

        Returns:
            Response built from the first unserved matching descriptor.

        Raises:
            The matched descriptor's error, if configured.
            InvalidPatternError: If a descriptor URL pattern cannot be evaluated.
            RegistryExhaustedError: If no unserved descriptor matches.
        """
        url = str(request.url)
        safe_url = sanitize_url(url)

        with self._lock:
            self._logger.info(f"mock request url {request.method} {safe_url}")

            idx = self._find_match(url)
            if idx is None:
                if self._settings.dump_on_exhaustion:
                    self._dump_table(safe_url)
                raise RegistryExhaustedError(
                    request.method, safe_url, len(self._data)
                )

            # write back through the index, the list holds the only copy
            self._data[idx].served = True
            self._last_served = idx
            data = self._data[idx]

            status_code = data.status_code or self._settings.default_status_code
            self._logger.info(
                f"{request.method} <{safe_url}>, {status_code}: "
                f"{sanitize_url(str(data))}"
            )

        if data.error is not None:
            raise data.error

        return httpx.Response(
            status_code=status_code,
            headers={},
            content=data.body,
            request=request,
        )

    def _find_match(self, url: str) -> int | None:
        """Return the index of the first unserved descriptor matching url."""
        for idx in range(len(self._data)):
            data = self._data[idx]
            if data.served:
                continue
            if data.url and not self._matches(data.url, url):
                continue
            return idx
        return None

    @staticmethod
    def _matches(pattern: str, url: str) -> bool:
        try:
            return re.search(pattern, url) is not None
        except (re.error, TypeError) as e:
            raise InvalidPatternError(pattern, e) from e

    def _dump_table(self, safe_url: str) -> None:
        for idx, data in enumerate(self._data):
            self._logger.error(
                f"{idx}: {data.served} {sanitize_url(str(data.url))} {data.status_code}\n"
                f"{safe_url}\n"
                f"{data.body!r}"
            )
            self._logger.error(_DUMP_SEPARATOR)

    def reset(self) -> None:
        """Mark every descriptor unserved so the responder can be reused in the same test."""
        with self._lock:
            for idx in range(len(self._data)):
                self._data[idx].served = False
            self._last_served = 0

    def set_data(self, data: MockResponseList) -> None:
        """Replace the descriptor list and reset it.

        Not safe against in-flight dispatches reading the old list; finish
        setup before issuing requests.

        Args:
            data: Descriptors to serve, in priority order.
        """
        with self._lock:
            self._data = data
            self.reset()

    def get_data(self) -> MockResponseList:
        """Return the current descriptor list."""
        with self._lock:
            return self._data

    def last_data(self) -> bytes:
        """Return the body of the descriptor served last.

        Only meaningful after at least one successful dispatch.

        Raises:
            IndexError: If the descriptor list is empty.
        """
        with self._lock:
            return self._data[self._last_served].body

    def all_consumed(self) -> bool:
        """Check whether every descriptor has been served.

        Useful at the end of a test to assert that all expected calls were
        made. Logs the first unserved descriptor when returning False.
        """
        with self._lock:
            for data in self._data:
                if not data.served:
                    self._logger.debug(f"unserved mock response: {data}")
                    return False
            return True

    def unserved(self) -> list[MockResponse]:
        """Return the descriptors not served yet, in list order."""
        with self._lock:
            return [data for data in self._data if not data.served]
