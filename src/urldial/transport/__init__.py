"""src/urldial/transport/__init__.py

Transport layer module for Urldial.

This module opens plain TCP connections to the host and port described by
a parsed URL.
"""

from .connection import Connection, connect

__all__ = ["Connection", "connect"]
