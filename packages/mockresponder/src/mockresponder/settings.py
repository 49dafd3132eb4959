"""Settings reader for the mock responder."""

from typing import Any

from mockresponder.domain.exceptions import MockResponderConfigError
from mockresponder.domain.settings import ResponderSettings

_KNOWN_FIELDS = (
    "default_status_code",
    "context_key",
    "dump_on_exhaustion",
    "require_all_consumed",
)

_BOOL_FIELDS = ("dump_on_exhaustion", "require_all_consumed")

_TRUE_STRINGS = ("1", "true", "yes", "on")
_FALSE_STRINGS = ("0", "false", "no", "off")


def _parse_bool(field: str, value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in _TRUE_STRINGS:
            return True
        if lowered in _FALSE_STRINGS:
            return False
    raise MockResponderConfigError(f"{field} must be a boolean, got: {value!r}")


def _parse_int(field: str, value: Any) -> int:
    if isinstance(value, bool):
        raise MockResponderConfigError(f"{field} must be an int, got: {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError as e:
            raise MockResponderConfigError(
                f"{field} must be an int, got: {value!r}"
            ) from e
    raise MockResponderConfigError(f"{field} must be an int, got: {value!r}")


def get_responder_settings(config: dict[str, Any]) -> ResponderSettings:
    """Convert a config dict to a ResponderSettings domain object.

    Keys are the snake_case field names of ResponderSettings. Missing keys
    keep their defaults; None values are treated as missing. String values
    (as read from ini files or environment) are coerced.

    Args:
        config: Config dict with snake_case keys

    Returns:
        ResponderSettings domain object

    Raises:
        MockResponderConfigError: If keys are unknown or values are invalid
    """
    unknown = [key for key in config if key not in _KNOWN_FIELDS]
    if unknown:
        raise MockResponderConfigError(
            f"Unknown mock responder settings: {', '.join(sorted(unknown))}"
        )

    kwargs: dict[str, Any] = {}
    for field in _KNOWN_FIELDS:
        value = config.get(field)
        if value is None:
            continue
        if field in _BOOL_FIELDS:
            kwargs[field] = _parse_bool(field, value)
        elif field == "default_status_code":
            kwargs[field] = _parse_int(field, value)
        else:
            kwargs[field] = value

    # Create domain object (validation happens in __post_init__)
    return ResponderSettings(**kwargs)
