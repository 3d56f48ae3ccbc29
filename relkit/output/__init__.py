"""Console and log output."""

from relkit.output.console import ConsoleProtocol, MockConsole, RichConsole, Style
from relkit.output.log import LoggerProtocol, MockLogger, NullLogger, StdLogger, configure_logging

__all__ = [
    "ConsoleProtocol",
    "LoggerProtocol",
    "MockConsole",
    "MockLogger",
    "NullLogger",
    "RichConsole",
    "StdLogger",
    "Style",
    "configure_logging",
]
