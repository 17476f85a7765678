"""src/urldial/http/__init__.py

URL parsing for Urldial.
"""

from .url import URL, parse

__all__ = ["URL", "parse"]
