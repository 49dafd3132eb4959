"""Mock response descriptor domain entity."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class MockResponse:
    """One canned response served by the MockResponder.

    The URL is a regular expression. When set, the first unserved response
    whose pattern is found in the request URL is served. When empty, the
    first unserved response is served regardless of the URL.

    Attributes:
        body: Raw response payload.
        status_code: HTTP status code. 0 means unset and is served as the
                     configured default (200 unless overridden).
        url: Regex searched in the fully rendered request URL. Empty matches
             anything.
        error: Exception raised instead of returning a response, modeling an
               origin failure such as a refused connection.
        served: Whether this response has been consumed. Mutated in place by
                the responder; excluded from equality.
    """

    body: bytes = b""
    status_code: int = 0
    url: str = ""
    error: BaseException | None = None
    served: bool = field(default=False, compare=False)

    def __str__(self) -> str:
        return f"{self.url}/{self.status_code}/{self.error}/{self.served}"


MockResponseList = list[MockResponse]
