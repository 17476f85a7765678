"""src/urldial/transport/connection.py

TCP connection management module.

This module opens a single blocking TCP connection to the host and port of a
parsed URL. There is no retry, timeout, TLS or pooling: the OS default
connect behaviour applies and any transport failure is reported as
ConnectionError.
"""

import select
import socket
from typing import Any, Optional

# pylint: disable=redefined-builtin
from urldial.exceptions import ConnectionError
from urldial.http.url import URL

__all__ = ["Connection", "connect"]


class Connection:
    """
    Caller-owned TCP connection handle.

    Attributes:
        host: The target hostname or IP address.
        port: The target port number.
        sock: The underlying socket object, None until opened or after close.
    """

    __slots__ = ("host", "port", "sock")

    def __init__(self, host: str, port: int) -> None:
        self.host = host
        self.port = port
        self.sock: Optional[socket.socket] = None

    def open(self) -> socket.socket:
        """
        Open the TCP connection in a single blocking attempt.

        Raises:
            ConnectionError: DNS resolution, refusal or any other OSError
                raised while connecting, or a host the idna codec cannot
                encode (empty or over-long label).
        """
        try:
            self.sock = socket.create_connection((self.host, self.port))

        except (OSError, UnicodeError) as e:
            raise ConnectionError(
                f"Connection error to {self.host}:{self.port} - {e}",
                host=self.host,
                port=self.port,
            ) from e

        return self.sock

    def close(self) -> None:
        """
        Close the connection if it is open.
        """
        if self.sock:
            try:
                self.sock.close()
            except OSError:
                pass
            self.sock = None

    def fileno(self) -> int:
        """Socket file descriptor, or -1 when not connected."""
        if not self.sock:
            return -1
        return self.sock.fileno()

    def __enter__(self) -> "Connection":
        if self.sock is None:
            self.open()
        return self

    def __exit__(
        self,
        exc_type: Optional[type],
        exc_val: Optional[BaseException],
        exc_tb: Optional[Any],
    ) -> None:
        self.close()

    def __repr__(self) -> str:
        state = "open" if self.sock else "closed"
        return f"<Connection {self.host}:{self.port} {state}>"

    def is_usable(self) -> bool:
        """
        Check if the connection appears usable (not closed by peer).
        """
        if not self.sock:
            return False

        try:
            readable, _, _ = select.select([self.sock], [], [], 0)
            if readable:
                # Readable with no data means the peer closed its side
                return bool(self.sock.recv(1, socket.MSG_PEEK))

            return True

        except OSError:
            return False


def connect(url: URL) -> Connection:
    """
    Open a TCP connection to ``(url.host, url.port)``.

    Args:
        url: A value produced by ``urldial.parse``.

    Returns:
        Connection: An open handle; the caller is responsible for closing it.

    Raises:
        ConnectionError: The transport layer failed to connect.
    """
    conn = Connection(url.host, url.port)
    conn.open()
    return conn
