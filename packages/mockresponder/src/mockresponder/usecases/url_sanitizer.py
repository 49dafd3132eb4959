"""URL sanitizing for log output."""

_CONTROL_CHARS = str.maketrans("", "", "\r\n")


def sanitize_url(url: str) -> str:
    """Strip carriage returns and line feeds from a URL.

    Prevents log injection through request URLs; every other character is
    kept verbatim.

    Args:
        url: The URL as rendered for the request.

    Returns:
        The URL without "\\r" and "\\n".
    """
    return url.translate(_CONTROL_CHARS)
