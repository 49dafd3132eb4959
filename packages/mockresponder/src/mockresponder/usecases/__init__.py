"""Use cases: the mock response registry and its request context."""

from mockresponder.usecases.registry import (
    ContextDispatch,
    MockResponder,
    default_dispatch,
    responder_from_request,
)
from mockresponder.usecases.request_context import (
    RequestContext,
    bind_responder,
    new_request_context,
)
from mockresponder.usecases.url_sanitizer import sanitize_url

__all__ = [
    "MockResponder",
    "ContextDispatch",
    "default_dispatch",
    "responder_from_request",
    "RequestContext",
    "new_request_context",
    "bind_responder",
    "sanitize_url",
]
