"""Shared pytest fixtures for Urldial tests."""

import _thread
import threading
from contextlib import contextmanager

import pytest


@pytest.fixture
def timeout_context():
    """Fixture failing the test when a blocking socket call overruns."""

    @contextmanager
    def _timeout_context(seconds):
        timer = threading.Timer(seconds, _thread.interrupt_main)
        timer.start()
        try:
            yield
        except KeyboardInterrupt:
            pytest.fail(f"Blocking call did not return within {seconds} seconds")
        finally:
            timer.cancel()

    return _timeout_context
