"""Visitor records and the actions the desk takes for them."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

# Ages are stored as an 8-bit signed value.
MIN_AGE = -128
MAX_AGE = 127


def normalize_name(raw: str) -> str:
    """Trim surrounding whitespace (line terminator included) and lower-case."""
    return raw.strip().lower()


class ActionKind(Enum):
    """Discriminant for what the desk does with a visitor."""

    ACCEPT = "accept"
    ACCEPT_WITH_NOTE = "accept_with_note"
    PROBATION = "probation"
    REFUSE = "refuse"


@dataclass(frozen=True)
class VisitorAction:
    """
    Tagged action for a visitor.

    Only ``ACCEPT_WITH_NOTE`` carries a note; use the factory
    classmethods rather than building variants by hand.
    """

    kind: ActionKind
    note: Optional[str] = None

    def __post_init__(self) -> None:
        if self.kind is ActionKind.ACCEPT_WITH_NOTE and self.note is None:
            raise ValueError("accept_with_note requires a note")
        if self.kind is not ActionKind.ACCEPT_WITH_NOTE and self.note is not None:
            raise ValueError(f"{self.kind.value} does not take a note")

    @classmethod
    def accept(cls) -> "VisitorAction":
        return cls(ActionKind.ACCEPT)

    @classmethod
    def accept_with_note(cls, note: str) -> "VisitorAction":
        return cls(ActionKind.ACCEPT_WITH_NOTE, note)

    @classmethod
    def probation(cls) -> "VisitorAction":
        return cls(ActionKind.PROBATION)

    @classmethod
    def refuse(cls) -> "VisitorAction":
        return cls(ActionKind.REFUSE)

    def to_dict(self) -> dict:
        data = {"kind": self.kind.value}
        if self.note is not None:
            data["note"] = self.note
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "VisitorAction":
        """Create from a dict such as ``{"kind": "accept_with_note", "note": "..."}``."""
        note = data.get("note")
        if note is not None and not isinstance(note, str):
            raise TypeError(f"note must be a string, got {note!r}")
        return cls(kind=ActionKind(data["kind"]), note=note)


@dataclass(frozen=True)
class Visitor:
    """
    A single entry on the visitor list.

    Attributes:
        name: Lower-cased name used as the lookup key
        greeting: Text shown before the action messages
        action: What the desk does when this visitor shows up
        age: Age in years, used for the alcohol notice
    """

    name: str
    greeting: str
    action: VisitorAction
    age: int = 0

    def __post_init__(self) -> None:
        if not MIN_AGE <= self.age <= MAX_AGE:
            raise ValueError(
                f"age must be between {MIN_AGE} and {MAX_AGE}, got {self.age}"
            )
        name = normalize_name(self.name)
        if not name:
            raise ValueError("name must not be empty; an empty name is the quit signal")
        # Frozen dataclass: normalize through object.__setattr__.
        object.__setattr__(self, "name", name)

    @classmethod
    def newcomer(cls, name: str) -> "Visitor":
        """Visitor admitted on probation after an unknown name was entered."""
        return cls(
            name=name,
            greeting="New friend",
            action=VisitorAction.probation(),
            age=0,
        )

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "name": self.name,
            "greeting": self.greeting,
            "action": self.action.to_dict(),
            "age": self.age,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Visitor":
        """
        Create from a seed entry.

        The action may be given inline (``action: accept_with_note`` with a
        sibling ``note``) or as a nested mapping.
        """
        for key in ("name", "greeting"):
            if not isinstance(data[key], str):
                raise TypeError(f"{key} must be a string, got {data[key]!r}")

        action_data = data["action"]
        if isinstance(action_data, str):
            action_data = {"kind": action_data, "note": data.get("note")}
        return cls(
            name=data["name"],
            greeting=data["greeting"],
            action=VisitorAction.from_dict(action_data),
            age=int(data.get("age", 0)),
        )
