"""Request context carrier for the mock responder.

The responder travels with each request inside httpx request extensions,
keyed by the configured context key. Callers either pass the carrier
explicitly (``client.get(url, extensions=ctx)``) or let the mock transport
bind it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import httpx

from mockresponder.domain.settings import DEFAULT_CONTEXT_KEY

if TYPE_CHECKING:
    from mockresponder.usecases.registry import MockResponder

RequestContext = dict[str, Any]


def new_request_context(
    responder: MockResponder, context_key: str = DEFAULT_CONTEXT_KEY
) -> RequestContext:
    """Create a carrier holding the responder.

    Args:
        responder: The responder requests should be served from.
        context_key: Extensions key to store it under.

    Returns:
        Dict suitable for the ``extensions=`` argument of httpx calls.
    """
    return {context_key: responder}


def bind_responder(
    request: httpx.Request,
    responder: MockResponder,
    context_key: str = DEFAULT_CONTEXT_KEY,
) -> None:
    """Attach the responder to a request unless the caller already did.

    An explicitly supplied carrier wins, including a broken one, so that
    misconfigured fixtures are still detected at dispatch.
    """
    request.extensions.setdefault(context_key, responder)
