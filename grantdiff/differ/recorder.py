"""Error recorders: append-only sinks for discrepancy messages."""

from __future__ import annotations

import threading
from typing import Protocol


class ErrorRecorder(Protocol):
    """Sink the orchestrator reports every discrepancy to."""

    def record_error(self, error: str | Exception) -> None: ...

    def has_errors(self) -> bool: ...

    def error_strings(self) -> list[str]: ...


class AllErrorRecorder:
    """Keeps every recorded error, in recording order.

    Appends are serialised by a lock so one recorder can collect from several
    threads diffing independent snapshot pairs.  Messages from different
    threads then appear in whatever order the appends happened.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._errors: list[str | Exception] = []

    def record_error(self, error: str | Exception) -> None:
        with self._lock:
            self._errors.append(error)

    def has_errors(self) -> bool:
        with self._lock:
            return bool(self._errors)

    def error_strings(self) -> list[str]:
        with self._lock:
            return [str(e) for e in self._errors]

    def __len__(self) -> int:
        with self._lock:
            return len(self._errors)
