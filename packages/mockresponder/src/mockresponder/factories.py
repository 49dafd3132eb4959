"""Factory functions for creating mock responders.

Provides the construction interface: a fresh registry plus the context
carrier that requests must carry so the default dispatch strategy can
recover the registry.
"""

from __future__ import annotations

from mockresponder.adapters.ports import LoggingPort
from mockresponder.domain.settings import ResponderSettings
from mockresponder.usecases.registry import MockResponder
from mockresponder.usecases.request_context import RequestContext


def new_mock_responder(
    settings: ResponderSettings | None = None,
    logger: LoggingPort | None = None,
) -> tuple[MockResponder, RequestContext]:
    """Create a MockResponder and its accompanying request context.

    During a request the responder is retrieved from the request extensions
    under ``settings.context_key``.

    Args:
        settings: Responder configuration. Defaults to ResponderSettings().
        logger: Logging port for dispatch diagnostics. Defaults to the
                "mockresponder" stdlib logger.

    Returns:
        Tuple of (responder, context). Pass the context as ``extensions=`` on
        each httpx call, or build the client with MockTransport(responder).

    Example:
        >>> responder, ctx = new_mock_responder()
        >>> responder.set_data([MockResponse(body=b"OK")])
        >>> with httpx.Client(transport=MockTransport(responder)) as client:
        ...     client.get("http://api/ping", extensions=ctx).content
        b'OK'
    """
    responder = MockResponder(settings=settings, logger=logger)
    return responder, responder.context()
