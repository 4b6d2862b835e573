"""Expedition log stream and its sinks.

The simulation reports everything it does as ``LogEntry`` records handed to
a ``LogSink``. Any object with a ``log(entry)`` method is a sink:

- ConsoleSink: prints ``[HH:MM:SS] message`` lines
- MemorySink: keeps entries in memory (tests, summaries)
- LoggingSink: forwards messages to a stdlib ``logging.Logger``
"""

from __future__ import annotations

import logging
import sys
from datetime import datetime
from typing import Optional, Protocol, TextIO

from pydantic import BaseModel, ConfigDict


class LogEntry(BaseModel):
    """One timestamped line of the expedition log."""

    model_config = ConfigDict(frozen=True)

    time: datetime
    message: str

    def format(self) -> str:
        return f"[{self.time.strftime('%H:%M:%S')}] {self.message}"


class LogSink(Protocol):
    """Consumer of expedition log entries.

    Implementations must not raise; ``World.log`` still guards against
    sinks that do.
    """

    def log(self, entry: LogEntry) -> None: ...


class ConsoleSink:
    """Writes formatted entries to a text stream (stdout by default)."""

    def __init__(self, stream: Optional[TextIO] = None):
        self._stream = stream

    def log(self, entry: LogEntry) -> None:
        stream = self._stream or sys.stdout
        print(entry.format(), file=stream)


class MemorySink:
    """Keeps every entry in order."""

    def __init__(self) -> None:
        self.entries: list[LogEntry] = []

    def log(self, entry: LogEntry) -> None:
        self.entries.append(entry)

    @property
    def messages(self) -> list[str]:
        return [entry.message for entry in self.entries]

    def clear(self) -> None:
        self.entries.clear()


class LoggingSink:
    """Forwards messages to a stdlib logger."""

    def __init__(self, logger: Optional[logging.Logger] = None, level: int = logging.INFO):
        self._logger = logger or logging.getLogger("expedition.day")
        self._level = level

    def log(self, entry: LogEntry) -> None:
        self._logger.log(self._level, entry.message)
