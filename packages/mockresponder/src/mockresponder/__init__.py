"""mock-responder: Canned HTTP responses for httpx-based tests."""

__version__ = "0.1.0"

from mockresponder.domain.descriptor import MockResponse, MockResponseList
from mockresponder.domain.exceptions import (
    FixtureError,
    InvalidContextError,
    InvalidPatternError,
    MissingContextError,
    MockResponderConfigError,
    NullResponderError,
    RegistryExhaustedError,
)
from mockresponder.domain.settings import ResponderSettings
from mockresponder.usecases.registry import MockResponder, default_dispatch
from mockresponder.adapters.httpx_transport import AsyncMockTransport, MockTransport
from mockresponder.factories import new_mock_responder
from mockresponder.settings import get_responder_settings

__all__ = [
    "MockResponse",
    "MockResponseList",
    "MockResponder",
    "default_dispatch",
    "new_mock_responder",
    "MockTransport",
    "AsyncMockTransport",
    "ResponderSettings",
    "get_responder_settings",
    "MockResponderConfigError",
    "FixtureError",
    "MissingContextError",
    "InvalidContextError",
    "NullResponderError",
    "InvalidPatternError",
    "RegistryExhaustedError",
]
