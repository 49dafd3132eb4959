"""Domain exceptions.

Exception hierarchy:
- MockResponderConfigError: Raised when responder settings are invalid.
  Ordinary Exception, recoverable like any configuration error.
- FixtureError: Base for fixture faults. Derives from BaseException so that
  application code under test catching Exception cannot swallow it.
  - MissingContextError: The request carries no responder.
  - InvalidContextError: The carrier holds something that is not a responder.
  - NullResponderError: The carrier holds None.
  - InvalidPatternError: A descriptor URL pattern is not a valid regex.
  - RegistryExhaustedError: No unserved descriptor matches the request.

Errors configured on a descriptor (data-level failures) are not part of this
hierarchy; they are raised as-is from dispatch.
"""

from __future__ import annotations

from typing import Any


class MockResponderConfigError(Exception):
    """Raised when mock responder configuration is invalid.

    Raised by ResponderSettings validation and by the settings reader when
    a config dict is malformed.
    """

    pass


class FixtureError(BaseException):
    """A test fixture is misconfigured.

    Raised instead of returning an error so a broken fixture cannot be
    mistaken for a tested failure mode. Catch it explicitly with
    ``pytest.raises(FixtureError)`` to assert that misconfiguration is
    detected.
    """

    pass


class MissingContextError(FixtureError):
    """Raised when a request has no mock responder attached."""

    def __init__(self, key: str) -> None:
        super().__init__(f"no mock responder context under key {key!r}")
        self.key = key


class InvalidContextError(FixtureError):
    """Raised when the attached context value is not a MockResponder.

    Attributes:
        key: Extensions key that was looked up.
        value_type: Name of the type found under the key.
    """

    def __init__(self, key: str, value: Any) -> None:
        self.key = key
        self.value_type = type(value).__name__
        super().__init__(
            f"context value under key {key!r} is not a MockResponder, "
            f"got {self.value_type}"
        )


class NullResponderError(FixtureError):
    """Raised when the context key is present but holds None."""

    def __init__(self, key: str) -> None:
        super().__init__(f"mock responder under key {key!r} is None")
        self.key = key


class InvalidPatternError(FixtureError):
    """Raised when a descriptor URL pattern fails to compile or is not a string.

    Attributes:
        pattern: The offending pattern.
        original_error: The underlying re.error or TypeError.
    """

    def __init__(self, pattern: str, original_error: Exception) -> None:
        super().__init__(f"invalid URL pattern {pattern!r}: {original_error}")
        self.pattern = pattern
        self.original_error = original_error


class RegistryExhaustedError(FixtureError):
    """Raised when no unserved descriptor matches a request.

    Attributes:
        method: HTTP method of the unmatched request.
        url: Sanitized URL of the unmatched request.
        descriptors: Number of descriptors in the registry.
    """

    def __init__(self, method: str, url: str, descriptors: int) -> None:
        super().__init__(
            f"ran out of mock responses for {method} {url} "
            f"({descriptors} descriptors registered)"
        )
        self.method = method
        self.url = url
        self.descriptors = descriptors
