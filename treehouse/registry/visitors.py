"""In-memory visitor registry."""

from __future__ import annotations

import json
from typing import Iterable, Iterator, Optional

from treehouse.models.visitor import ActionKind, Visitor
from treehouse.utils.logging import get_logger
from treehouse.utils.result import Err, Ok, Result, VisitorNotFound

logger = get_logger("registry.visitors")


class VisitorRegistry:
    """
    Ordered, append-only list of visitors for a single run.

    Entries are never removed or replaced, so the size only grows. Names
    are not unique; lookups return the first match in insertion order.
    """

    def __init__(self, visitors: Optional[Iterable[Visitor]] = None) -> None:
        self._visitors: list[Visitor] = list(visitors or [])

    def __len__(self) -> int:
        return len(self._visitors)

    def __iter__(self) -> Iterator[Visitor]:
        return iter(self._visitors)

    def __getitem__(self, index: int) -> Visitor:
        return self._visitors[index]

    @property
    def visitors(self) -> tuple[Visitor, ...]:
        """Snapshot of the current entries."""
        return tuple(self._visitors)

    def find(self, key: str) -> Result[Visitor, VisitorNotFound]:
        """
        Look up a visitor by normalized name.

        Args:
            key: Name already trimmed and lower-cased

        Returns:
            Ok with the first matching visitor, or Err(VisitorNotFound)
        """
        for visitor in self._visitors:
            if visitor.name == key:
                return Ok(visitor)
        return Err(VisitorNotFound(key))

    def add(self, visitor: Visitor) -> Visitor:
        """Append a visitor to the end of the list."""
        self._visitors.append(visitor)
        logger.debug("visitor_added", name=visitor.name, total=len(self._visitors))
        return visitor

    def admit(self, name: str) -> Visitor:
        """
        Put an unknown visitor on probation.

        Raises:
            ValueError: If name is empty (empty input means quit)
        """
        if not name:
            raise ValueError("cannot admit a visitor without a name")
        visitor = self.add(Visitor.newcomer(name))
        logger.info("visitor_admitted", name=visitor.name, total=len(self._visitors))
        return visitor

    def to_dict(self) -> dict:
        return {
            "total_visitors": len(self._visitors),
            "visitors": [v.to_dict() for v in self._visitors],
        }

    def dump(self, format_type: str = "text") -> str:
        """
        Render every entry with all of its fields.

        Args:
            format_type: 'text' for an indented listing, 'json' for JSON

        Returns:
            Rendered registry
        """
        if format_type == "json":
            return json.dumps(self.to_dict(), indent=2)

        lines = ["["]
        for visitor in self._visitors:
            lines.append("    Visitor {")
            lines.append(f"        name: {json.dumps(visitor.name, ensure_ascii=False)},")
            lines.append(f"        action: {_render_action(visitor)},")
            lines.append(f"        age: {visitor.age},")
            lines.append(f"        greeting: {json.dumps(visitor.greeting, ensure_ascii=False)},")
            lines.append("    },")
        lines.append("]")
        return "\n".join(lines)


ACTION_LABELS = {
    ActionKind.ACCEPT: "Accept",
    ActionKind.ACCEPT_WITH_NOTE: "AcceptWithNote",
    ActionKind.PROBATION: "Probation",
    ActionKind.REFUSE: "Refuse",
}


def _render_action(visitor: Visitor) -> str:
    action = visitor.action
    label = ACTION_LABELS[action.kind]
    if action.note is None:
        return label
    return f"{label} {{ note: {json.dumps(action.note, ensure_ascii=False)} }}"
