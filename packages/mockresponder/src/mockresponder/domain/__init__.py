"""Domain layer: descriptors, settings and the exception hierarchy."""

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

__all__ = [
    "MockResponse",
    "MockResponseList",
    "ResponderSettings",
    "MockResponderConfigError",
    "FixtureError",
    "MissingContextError",
    "InvalidContextError",
    "NullResponderError",
    "InvalidPatternError",
    "RegistryExhaustedError",
]
