"""Event loggers used by the solver and the command-line tool.

Events are a short name plus keyword fields. :class:`NoopLogger` is the
default everywhere so that library users pay nothing for logging they did not
ask for; the CLI swaps in a :class:`StdLogger`.
"""

from __future__ import annotations

import json
import sys
import time
from typing import Any, Dict, Protocol, TextIO

LEVELS: Dict[str, int] = {"debug": 10, "info": 20, "warning": 30}


class Logger(Protocol):
    """Protocol for minimal event loggers."""

    def debug(self, event: str, **fields: Any) -> None:
        """Emit a ``DEBUG``-level event."""
        ...

    def info(self, event: str, **fields: Any) -> None:
        """Emit an ``INFO``-level event."""
        ...

    def warning(self, event: str, **fields: Any) -> None:
        """Emit a ``WARNING``-level event."""
        ...


class NoopLogger:
    """Logger that discards all events."""

    def debug(self, event: str, **fields: Any) -> None:  # pragma: no cover - noop
        return

    def info(self, event: str, **fields: Any) -> None:  # pragma: no cover - noop
        return

    def warning(self, event: str, **fields: Any) -> None:  # pragma: no cover - noop
        return


class StdLogger:
    """Write one line per event, as ``key=value`` pairs or as JSON.

    Args:
        level: Minimum level that is written (``debug``, ``info`` or ``warning``).
        json_fmt: Emit JSON objects instead of ``key=value`` text.
        stream: Destination stream, ``sys.stderr`` by default.
        timestamps: Prefix every event with a ``ts`` field (UNIX seconds).
    """

    def __init__(
        self,
        level: str = "warning",
        json_fmt: bool = False,
        stream: TextIO | None = None,
        timestamps: bool = False,
    ) -> None:
        if level not in LEVELS:
            raise ValueError(f"unknown log level {level!r}")
        self.level = level
        self.json_fmt = json_fmt
        self.stream = stream or sys.stderr
        self.timestamps = timestamps

    def enabled(self, level: str) -> bool:
        """Return ``True`` when events at ``level`` are written."""
        return LEVELS[level] >= LEVELS[self.level]

    def log(self, level: str, event: str, **fields: Any) -> None:
        """Emit ``event`` at ``level`` with additional ``fields``."""
        if not self.enabled(level):
            return
        if self.timestamps:
            fields = {"ts": round(time.time(), 3), **fields}
        if self.json_fmt:
            obj: Dict[str, Any] = {"level": level, "event": event}
            obj.update(fields)
            line = json.dumps(obj, default=str)
        else:
            kv = " ".join(f"{k}={v}" for k, v in fields.items())
            line = f"{level} {event} {kv}".rstrip()
        self.stream.write(line + "\n")

    def debug(self, event: str, **fields: Any) -> None:
        self.log("debug", event, **fields)

    def info(self, event: str, **fields: Any) -> None:
        self.log("info", event, **fields)

    def warning(self, event: str, **fields: Any) -> None:
        self.log("warning", event, **fields)


__all__ = ["LEVELS", "Logger", "NoopLogger", "StdLogger"]
