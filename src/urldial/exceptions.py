"""src/urldial/exceptions.py

Urldial Exceptions hierarchy.
"""

# pylint: disable=redefined-builtin
from typing import Optional


class UrldialError(Exception):
    """Base exception for all Urldial errors."""


class URLError(UrldialError, ValueError):
    """Base exception for URL parsing errors."""


class MissingSchemeDelimiter(URLError):
    """The input has no "://" between scheme and host."""

    def __init__(self, message: str = "URL missing scheme delimiter '://'"):
        super().__init__(message)


class UnsupportedScheme(URLError):
    """
    The scheme is present but is not "http".

    Attributes:
        scheme: The offending scheme text, exactly as it appeared in the input.
    """

    def __init__(self, scheme: str, message: Optional[str] = None):
        self.scheme = scheme
        if message is None:
            message = f"Only http is supported, got scheme {scheme!r}"
        super().__init__(message)


class EmptyHost(URLError):
    """Nothing between "://" and the first "/"."""

    def __init__(self, message: str = "URL host is empty"):
        super().__init__(message)


class NetworkError(UrldialError):
    """
    Base exception for network-related errors.
    Wraps socket errors and other connection issues.
    """


class ConnectionError(NetworkError):
    """
    The transport layer failed to establish a connection.

    The underlying OSError (DNS failure, refusal, unreachable network...)
    is kept on ``__cause__``.
    """

    def __init__(
        self,
        message: str = "Connection failed",
        host: Optional[str] = None,
        port: Optional[int] = None,
    ):
        self.host = host
        self.port = port
        super().__init__(message)
