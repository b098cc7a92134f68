"""Public exports for terminal and logging presentation sinks."""

from .console import RichConsoleSink, format_remaining
from .logging_sink import LoggingSink

__all__ = [
    "LoggingSink",
    "RichConsoleSink",
    "format_remaining",
]
