"""Shared fixtures for the treehouse test suite."""
import io
import json

import pytest

from treehouse.registry import VisitorRegistry, default_visitors
from treehouse.utils.logging import configure_logging


@pytest.fixture(autouse=True)
def log_stream():
    """Send log events to an in-memory buffer for every test.

    Returns the buffer so tests can assert on emitted events.
    """
    stream = io.StringIO()
    configure_logging(level="debug", format_type="json", stream=stream)
    return stream


@pytest.fixture
def registry():
    """Registry with the built-in bert/steve/fred seed list."""
    return VisitorRegistry(default_visitors())


@pytest.fixture
def log_events(log_stream):
    """Return a callable that parses the JSON log lines written so far."""

    def _events(event=None):
        events = [json.loads(line) for line in log_stream.getvalue().splitlines() if line.strip()]
        if event is not None:
            events = [e for e in events if e["event"] == event]
        return events

    return _events
