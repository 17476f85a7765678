"""src/urldial/http/url.py

URL parser for Urldial.

Only absolute ``http`` URLs of the form ``http://host[/path]`` are accepted.
Query strings, fragments, percent-encoding and explicit ports are not
interpreted: everything after the first ``/`` is kept verbatim as the path and
the port is always 80.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING

from urldial.exceptions import (
    EmptyHost,
    MissingSchemeDelimiter,
    UnsupportedScheme,
    URLError,
)

if TYPE_CHECKING:
    from urldial.transport.connection import Connection

__all__ = ["URL", "parse", "DEFAULT_PORT", "SUPPORTED_SCHEME", "SCHEME_DELIMITER"]

DEFAULT_PORT = 80
SUPPORTED_SCHEME = "http"
SCHEME_DELIMITER = "://"


@dataclass(frozen=True)
class URL:
    """
    Structured, immutable view of an absolute http URL.

    Construction validates every field, so a URL built directly holds the
    same guarantees as one returned by parse().

    Attributes:
        scheme: Always "http".
        host: Non-empty authority text, never containing "/".
        path: Request path, always starting with "/".
        port: TCP port in 0-65535; parse() always sets 80.
    """

    __slots__ = ("scheme", "host", "path", "port")

    scheme: str
    host: str
    path: str
    port: int

    def __post_init__(self) -> None:
        if self.scheme != SUPPORTED_SCHEME:
            raise UnsupportedScheme(self.scheme)
        if not self.host:
            raise EmptyHost()
        if "/" in self.host:
            raise URLError(f"URL host must not contain '/', got {self.host!r}")
        if not self.path.startswith("/"):
            raise URLError(f"URL path must start with '/', got {self.path!r}")
        if not 0 <= self.port <= 65535:
            raise URLError(f"URL port out of range 0-65535, got {self.port}")

    def geturl(self) -> str:
        """Rebuild the URL string as ``scheme://host/path``."""
        return f"{self.scheme}{SCHEME_DELIMITER}{self.host}{self.path}"

    def __str__(self) -> str:
        return self.geturl()

    def request(self) -> "Connection":
        """Open a TCP connection to this URL's host and port."""
        # pylint: disable=import-outside-toplevel
        from urldial.transport.connection import connect

        return connect(self)


def parse(url: str) -> URL:
    """
    Parse an absolute http URL into a URL value.

    Args:
        url: Raw input such as ``"http://example.com/index.html"``.

    Returns:
        URL: The decomposed URL with port 80.

    Raises:
        MissingSchemeDelimiter: The input contains no "://".
        UnsupportedScheme: The scheme is not exactly "http".
        EmptyHost: The host segment is empty.
    """
    scheme, sep, rest = url.partition(SCHEME_DELIMITER)
    if not sep:
        raise MissingSchemeDelimiter()

    # Exact match, no case folding or trimming.
    if scheme != SUPPORTED_SCHEME:
        raise UnsupportedScheme(scheme)

    host, sep, path = rest.partition("/")
    path = "/" + path if sep else "/"

    if not host:
        raise EmptyHost()

    return URL(scheme=scheme, host=host, path=path, port=DEFAULT_PORT)
