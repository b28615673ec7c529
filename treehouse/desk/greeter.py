"""Messages the desk prints for a known visitor."""

from __future__ import annotations

from typing import Callable

from treehouse.models.visitor import ActionKind, Visitor

DRINKING_AGE = 21


def greeting_lines(visitor: Visitor, drinking_age: int = DRINKING_AGE) -> list[str]:
    """
    Build the lines shown when a visitor on the list arrives.

    The greeting always comes first, followed by the messages for the
    visitor's action.

    Args:
        visitor: Matched visitor
        drinking_age: Visitors younger than this get the alcohol notice

    Returns:
        Lines to print, in order
    """
    lines = [visitor.greeting]
    kind = visitor.action.kind

    if kind is ActionKind.ACCEPT:
        lines.append(f"Welcome to the tree house, {visitor.name}")
    elif kind is ActionKind.ACCEPT_WITH_NOTE:
        lines.append(f"Welcome to the tree house, {visitor.name}")
        lines.append(visitor.action.note)
        if visitor.age < drinking_age:
            lines.append(f"Do not serve alcohol to {visitor.name}")
    elif kind is ActionKind.PROBATION:
        lines.append(f"{visitor.name} is now a probationary member")
    elif kind is ActionKind.REFUSE:
        lines.append(f"Do not allow {visitor.name} in!")
    else:
        raise ValueError(f"Unhandled visitor action: {kind}")

    return lines


def greet_visitor(
    visitor: Visitor,
    echo: Callable[[str], None],
    drinking_age: int = DRINKING_AGE,
) -> None:
    """Print the greeting lines for a visitor through ``echo``."""
    for line in greeting_lines(visitor, drinking_age=drinking_age):
        echo(line)
