"""Logger abstraction for library code.

Library code receives a ``LoggerProtocol`` instead of reaching for a global
logger, so tests can capture records and callers can route them anywhere.
Only the CLI configures handlers (``configure_logging``).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable

__all__ = [
    "LoggerProtocol",
    "StdLogger",
    "NullLogger",
    "MockLogger",
    "LogRecord",
    "configure_logging",
]


@runtime_checkable
class LoggerProtocol(Protocol):
    """Accepts structured debug records."""

    def debug(self, message: str, **fields: object) -> None: ...


def _format(message: str, fields: dict[str, object]) -> str:
    if not fields:
        return message
    pairs = " ".join(f"{k}={v}" for k, v in fields.items())
    return f"{message} {pairs}"


class StdLogger:
    """Forwards records to a stdlib ``logging`` logger."""

    def __init__(self, name: str = "relkit") -> None:
        self._logger = logging.getLogger(name)

    def debug(self, message: str, **fields: object) -> None:
        if self._logger.isEnabledFor(logging.DEBUG):
            self._logger.debug(_format(message, fields), extra={"fields": fields})


class NullLogger:
    """Drops every record."""

    def debug(self, message: str, **fields: object) -> None:
        del message, fields


@dataclass(frozen=True, slots=True)
class LogRecord:
    """A single record captured by MockLogger."""

    level: str
    message: str
    fields: dict[str, object]


def _empty_records() -> list[LogRecord]:
    return []


@dataclass
class MockLogger:
    """Logger that captures records for testing."""

    records: list[LogRecord] = field(default_factory=_empty_records)

    def debug(self, message: str, **fields: object) -> None:
        self.records.append(LogRecord("debug", message, dict(fields)))

    @property
    def text(self) -> str:
        """All records rendered as lines, fields included."""
        return "\n".join(_format(r.message, r.fields) for r in self.records)


def configure_logging(*, verbose: bool) -> None:
    """Install a Rich handler on the ``relkit`` logger.

    DEBUG when verbose, WARNING otherwise. Safe to call more than once.
    """
    # Import Rich lazily to avoid import-time dependency
    from rich.console import Console
    from rich.logging import RichHandler

    logger = logging.getLogger("relkit")
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)
    logger.addHandler(
        RichHandler(console=Console(stderr=True), show_path=False, markup=False)
    )
