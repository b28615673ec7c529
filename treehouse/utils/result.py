"""Result type for lookups and configuration loading.

Expected outcomes such as an unknown visitor or a bad config value are
returned as ``Ok``/``Err`` values so callers must handle both branches.
Exceptions are kept for fatal conditions.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, NoReturn, TypeVar, Union

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


class ResultError(Exception):
    """Raised when unwrapping the wrong side of a Result."""

    pass


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Represents a successful result."""

    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value

    def unwrap_err(self) -> NoReturn:
        raise ResultError(f"Called unwrap_err on Ok value: {self.value}")

    def __repr__(self) -> str:
        return f"Ok({self.value!r})"


@dataclass(frozen=True)
class Err(Generic[E]):
    """Represents an error result."""

    error: E

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def unwrap(self) -> NoReturn:
        raise ResultError(f"Called unwrap on Err value: {self.error}")

    def unwrap_err(self) -> E:
        return self.error

    def __repr__(self) -> str:
        return f"Err({self.error!r})"


Result = Union[Ok[T], Err[E]]


@dataclass(frozen=True)
class VisitorNotFound:
    """Lookup miss for a normalized name."""

    key: str

    @property
    def is_quit(self) -> bool:
        """An empty key is the quit signal, not an unknown visitor."""
        return self.key == ""

    def __str__(self) -> str:
        if self.is_quit:
            return "No name given"
        return f"{self.key} is not on the visitor list."


@dataclass(frozen=True)
class ConfigError:
    """Error in configuration."""

    field: str
    message: str

    def __str__(self) -> str:
        return f"Config error in '{self.field}': {self.message}"


class ExitCode:
    """Exit codes for the CLI."""

    GENERAL_ERROR = 1

    # Configuration errors (10-19)
    CONFIG_INVALID = 10

    # Input errors (20-29)
    INPUT_FAILED = 20
