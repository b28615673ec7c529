"""Interactive desk loop: prompt, look up, greet or admit."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Callable, Optional, TextIO

from treehouse.desk.greeter import DRINKING_AGE, greet_visitor
from treehouse.models.visitor import normalize_name
from treehouse.registry.visitors import VisitorRegistry
from treehouse.utils.logging import get_logger

logger = get_logger("desk.session")

PROMPT = "Hello, what's your name? (Leave empty and press ENTER to quit)"
READ_FAILURE_MESSAGE = "failed to readline"


class InputStreamError(Exception):
    """The input stream could not deliver a line."""

    def __init__(self, cause: Exception) -> None:
        self.cause = cause
        super().__init__(f"{READ_FAILURE_MESSAGE}: {cause}")


def read_name(stream: TextIO) -> str:
    """
    Read one line from ``stream`` and return its normalized form.

    End of stream returns an empty string, which callers treat as quit.

    Raises:
        InputStreamError: If the stream fails to deliver a line
    """
    try:
        line = stream.readline()
    except (OSError, UnicodeDecodeError, ValueError) as e:
        # ValueError covers reads from a closed stream.
        logger.error("input_read_failed", error=str(e))
        raise InputStreamError(e) from e
    return normalize_name(line)


@dataclass
class SessionSummary:
    """What happened during one desk session."""

    visits: int = 0
    admitted: int = 0
    registry_size: int = 0

    def to_dict(self) -> dict:
        return {
            "visits": self.visits,
            "admitted": self.admitted,
            "registry_size": self.registry_size,
        }


class VisitorSession:
    """
    Runs the desk until an empty name is entered.

    Output goes through ``echo`` so the session can be driven from the CLI
    or from tests without touching the real console.
    """

    def __init__(
        self,
        registry: VisitorRegistry,
        stream: TextIO,
        echo: Callable[[str], None],
        drinking_age: int = DRINKING_AGE,
        dump_format: str = "text",
    ) -> None:
        self.registry = registry
        self.stream = stream
        self.echo = echo
        self.drinking_age = drinking_age
        self.dump_format = dump_format

    def handle(self, name: str, summary: Optional[SessionSummary] = None) -> bool:
        """
        Process one normalized name.

        Args:
            name: Normalized name read from the input
            summary: Counters to update, if any

        Returns:
            False when the name is empty and the session should stop
        """
        result = self.registry.find(name)

        if result.is_ok():
            visitor = result.unwrap()
            logger.info("visitor_found", name=visitor.name, action=visitor.action.kind.value)
            greet_visitor(visitor, self.echo, drinking_age=self.drinking_age)
        else:
            miss = result.unwrap_err()
            if miss.is_quit:
                return False
            self.echo(str(miss))
            self.registry.admit(name)
            if summary is not None:
                summary.admitted += 1

        if summary is not None:
            summary.visits += 1
        return True

    def run(self) -> SessionSummary:
        """
        Prompt for names until an empty line, then print the final list.

        Raises:
            InputStreamError: If reading from the input stream fails
        """
        summary = SessionSummary()

        while True:
            self.echo(PROMPT)
            name = read_name(self.stream)
            self.echo(f"Hello {name}")
            self.echo(json.dumps(name, ensure_ascii=False))

            if not self.handle(name, summary):
                break

        self.echo("The final list of visitors:")
        self.echo(self.registry.dump(self.dump_format))

        summary.registry_size = len(self.registry)
        logger.info("session_finished", **summary.to_dict())
        return summary
