"""Desk loop and per-visitor messages."""

from treehouse.desk.greeter import DRINKING_AGE, greet_visitor, greeting_lines
from treehouse.desk.session import (
    PROMPT,
    READ_FAILURE_MESSAGE,
    InputStreamError,
    SessionSummary,
    VisitorSession,
    read_name,
)

__all__ = [
    "DRINKING_AGE",
    "greeting_lines",
    "greet_visitor",
    "PROMPT",
    "READ_FAILURE_MESSAGE",
    "InputStreamError",
    "SessionSummary",
    "VisitorSession",
    "read_name",
]
