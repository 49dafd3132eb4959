"""Pytest plugin providing mock responder fixtures.

Registered through the ``pytest11`` entry point, so installing the package
makes the fixtures available without any conftest changes.

Fixtures:
    mock_responder: ``(responder, ctx)`` tuple from new_mock_responder().
    mock_client: httpx.Client served by the mock_responder fixture.

Ini options (pytest.ini / pyproject ``[tool.pytest.ini_options]``):
    mock_responder_default_status_code = 200
    mock_responder_context_key = mock_responder
    mock_responder_dump_on_exhaustion = true
    mock_responder_require_all_consumed = false
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Iterator

import httpx
import pytest

from mockresponder.adapters.httpx_transport import MockTransport
from mockresponder.factories import new_mock_responder
from mockresponder.settings import get_responder_settings

if TYPE_CHECKING:
    from _pytest.config import Config
    from _pytest.config.argparsing import Parser
    from _pytest.fixtures import FixtureRequest

    from mockresponder.domain.settings import ResponderSettings
    from mockresponder.usecases.registry import MockResponder
    from mockresponder.usecases.request_context import RequestContext

INI_PREFIX = "mock_responder_"

# ini name suffix -> help text
_INI_OPTIONS: dict[str, str] = {
    "default_status_code": "Status code served when a mock response leaves it unset (default 200).",
    "context_key": "Request extensions key carrying the mock responder.",
    "dump_on_exhaustion": "Log the full mock response table when no response matches (default true).",
    "require_all_consumed": "Fail tests that leave mock responses unserved (default false).",
}


def pytest_addoption(parser: Parser) -> None:
    """Register the mock responder ini options."""
    for name, help_text in _INI_OPTIONS.items():
        parser.addini(f"{INI_PREFIX}{name}", help_text, default="")


def _settings_from_ini(config: Config) -> ResponderSettings:
    values: dict[str, Any] = {}
    for name in _INI_OPTIONS:
        value = config.getini(f"{INI_PREFIX}{name}")
        if value not in ("", None):
            values[name] = value
    return get_responder_settings(values)


@pytest.fixture
def mock_responder(
    request: FixtureRequest,
) -> Iterator[tuple[MockResponder, RequestContext]]:
    """Provide a fresh mock responder and its request context.

    When ``mock_responder_require_all_consumed`` is enabled, the test fails
    at teardown if any mock response was not served.
    """
    settings = _settings_from_ini(request.config)
    responder, ctx = new_mock_responder(settings=settings)

    yield responder, ctx

    if settings.require_all_consumed and not responder.all_consumed():
        unserved = responder.unserved()
        pytest.fail(
            f"{len(unserved)} mock response(s) not served: "
            + ", ".join(str(data) for data in unserved),
            pytrace=False,
        )


@pytest.fixture
def mock_client(
    mock_responder: tuple[MockResponder, RequestContext],
) -> Iterator[httpx.Client]:
    """Provide an httpx.Client whose transport is the mock responder."""
    responder, _ = mock_responder
    with httpx.Client(transport=MockTransport(responder)) as client:
        yield client
