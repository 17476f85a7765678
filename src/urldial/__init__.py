"""src/urldial/__init__.py

Urldial - parse absolute http URLs and open TCP connections to them.

Urldial is a zero-dependency library built entirely on Python's standard
library. It splits a URL string into scheme, host, path and port, and opens a
plain blocking TCP connection to the resulting host.

Example:
    Parsing::

        from urldial import parse

        url = parse('http://example.com/index.html')
        print(url.host, url.path, url.port)

    Connecting::

        from urldial import connect, parse

        with connect(parse('http://example.com/')) as conn:
            conn.sock.sendall(b'GET / HTTP/1.0\\r\\nHost: example.com\\r\\n\\r\\n')
"""

# pylint: disable=redefined-builtin
from urldial.exceptions import (
    ConnectionError,
    EmptyHost,
    MissingSchemeDelimiter,
    NetworkError,
    UnsupportedScheme,
    URLError,
    UrldialError,
)
from urldial.http.url import URL, parse
from urldial.transport.connection import Connection, connect
from urldial.version import __version__

__all__ = [
    "URL",
    "parse",
    "Connection",
    "connect",
    "UrldialError",
    "URLError",
    "MissingSchemeDelimiter",
    "UnsupportedScheme",
    "EmptyHost",
    "NetworkError",
    "ConnectionError",
    "__version__",
]
