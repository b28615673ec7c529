"""Visitors on the list when the desk opens."""

from __future__ import annotations

from treehouse.models.visitor import Visitor, VisitorAction


def default_visitors() -> list[Visitor]:
    """Build the built-in seed list. A fresh list is returned on every call."""
    return [
        Visitor(
            "Bert",
            "Hello Bert, enjoy your treehouse.",
            VisitorAction.accept(),
            45,
        ),
        Visitor(
            "steve",
            "Hi Steve. Your milk is in the fridge.",
            VisitorAction.accept_with_note("Lactose-free milk is in the fridge"),
            15,
        ),
        Visitor(
            "fred",
            "Wow, who invited Fred?",
            VisitorAction.refuse(),
            30,
        ),
    ]
