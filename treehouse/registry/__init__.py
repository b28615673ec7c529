"""Visitor registry for a single desk session.

- Keeps visitors in insertion order
- Looks names up with first-match-wins semantics
- Admits unknown visitors on probation
"""

from treehouse.registry.seed import default_visitors
from treehouse.registry.visitors import VisitorRegistry

__all__ = [
    "VisitorRegistry",
    "default_visitors",
]
