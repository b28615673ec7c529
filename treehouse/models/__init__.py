"""Data models for treehouse."""

from treehouse.models.visitor import (
    MAX_AGE,
    MIN_AGE,
    ActionKind,
    Visitor,
    VisitorAction,
    normalize_name,
)

__all__ = [
    "ActionKind",
    "VisitorAction",
    "Visitor",
    "normalize_name",
    "MIN_AGE",
    "MAX_AGE",
]
