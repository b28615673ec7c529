"""Utility modules for treehouse."""

from treehouse.utils.logging import (
    configure_logging,
    get_logger,
    get_session_id,
)
from treehouse.utils.result import (
    ConfigError,
    Err,
    ExitCode,
    Ok,
    Result,
    ResultError,
    VisitorNotFound,
)

__all__ = [
    # Logging
    "configure_logging",
    "get_logger",
    "get_session_id",
    # Results
    "Ok",
    "Err",
    "Result",
    "ResultError",
    "VisitorNotFound",
    "ConfigError",
    "ExitCode",
]
