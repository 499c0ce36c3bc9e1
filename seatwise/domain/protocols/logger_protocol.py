"""Structured logging port.

Messages are snake_case event names; everything variable goes into keyword
context so log lines stay queryable:

    logger.bind(occurrence_id=str(occurrence.id)).info(
        "registration_created", seat_count=2
    )
"""

from __future__ import annotations

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    """Backend-agnostic logger used by handlers and adapters."""

    def debug(self, message: str, /, **context: Any) -> None: ...

    def info(self, message: str, /, **context: Any) -> None: ...

    def warning(self, message: str, /, **context: Any) -> None: ...

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log an error; ``error`` adds ``error_type`` and ``error_message``."""
        ...

    def critical(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log a broken invariant, e.g. a seat counter about to go negative."""
        ...

    def bind(self, **context: Any) -> LoggerProtocol:
        """Return a logger that adds ``context`` to every line."""
        ...
