"""Mock responder settings domain entity."""

from dataclasses import dataclass

from mockresponder.domain.exceptions import MockResponderConfigError

DEFAULT_CONTEXT_KEY = "mock_responder"


@dataclass(frozen=True)
class ResponderSettings:
    """Mock responder configuration.

    Value object with zero external dependencies.

    Attributes:
        default_status_code: Status served when a descriptor leaves
                             status_code unset (0). Must be 100-599.
        context_key: Request extensions key under which the responder is
                     carried. Must be non-empty and non-whitespace.
        dump_on_exhaustion: Log the full descriptor table before raising
                            RegistryExhaustedError.
        require_all_consumed: Fail the pytest fixture at teardown when
                              descriptors remain unserved.
    """

    default_status_code: int = 200
    context_key: str = DEFAULT_CONTEXT_KEY
    dump_on_exhaustion: bool = True
    require_all_consumed: bool = False

    def __post_init__(self) -> None:
        """Validate settings after initialization."""
        self._validate_default_status_code()
        self._validate_context_key()

    def _validate_default_status_code(self) -> None:
        """Validate default_status_code is an int in the HTTP status range."""
        if isinstance(self.default_status_code, bool) or not isinstance(
            self.default_status_code, int
        ):
            raise MockResponderConfigError(
                f"default_status_code must be an int, got: {self.default_status_code!r}"
            )

        if not 100 <= self.default_status_code <= 599:
            raise MockResponderConfigError(
                f"default_status_code must be between 100 and 599, got: {self.default_status_code}"
            )

    def _validate_context_key(self) -> None:
        """Validate context_key is a non-empty, non-whitespace string."""
        if not isinstance(self.context_key, str):
            raise MockResponderConfigError(
                f"context_key must be a string, got: {self.context_key!r}"
            )

        if not self.context_key:
            raise MockResponderConfigError("context_key cannot be empty")

        if not self.context_key.strip():
            raise MockResponderConfigError("context_key cannot be whitespace-only")
