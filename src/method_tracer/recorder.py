"""In-memory store of traced calls.

A recorder belongs to exactly one tracer. Appends and snapshot copies share a
single lock whose hold time is one list operation; traced code never runs
while it is held. Sink output happens after the lock is released.
"""

from __future__ import annotations

import logging
import math
import threading
from datetime import datetime, timezone
from typing import Callable, List, Optional

from .config import TracerConfig
from .logging_utils import LoggingSink
from .models import CallError, CallRecord, CallStatus, ResultSnapshot

Sink = Callable[[int, str, CallRecord], None]


def format_duration(seconds: float) -> str:
    """Render a duration with a human-scaled unit."""

    if seconds >= 1.0:
        return f"{round(seconds, 3)}s"
    if seconds >= 0.001:
        return f"{round(seconds * 1000, 1)}ms"
    return f"{round(seconds * 1_000_000)}µs"


def format_call(record: CallRecord) -> str:
    """Build the single output line describing a recorded call."""

    duration = format_duration(record.execution_time)
    if record.status is CallStatus.ERROR:
        return f"TRACE: {record.qualified_name} [ERROR] took {duration} - {record.error}"
    return f"TRACE: {record.qualified_name} took {duration}"


class ResultRecorder:
    """Collect call records for one traced class."""

    def __init__(
        self,
        label: str,
        config: TracerConfig | None = None,
        sink: Optional[Sink] = None,
    ) -> None:
        self.label = label
        self.config = config or TracerConfig.from_options()
        self._sink: Sink = sink or LoggingSink()
        self._calls: List[CallRecord] = []
        self._lock = threading.Lock()

    def record_call(
        self,
        operation_name: str,
        execution_time: float,
        status: CallStatus | str,
        error: CallError | BaseException | None = None,
    ) -> CallRecord | None:
        """Store a completed call, or drop it when it ran under the threshold."""

        status = CallStatus(status)
        if not (math.isfinite(execution_time) and execution_time >= 0):
            raise ValueError(f"execution_time must be a finite value >= 0, got {execution_time!r}")
        if status is CallStatus.ERROR and error is None:
            raise ValueError("error status requires an error")
        if status is CallStatus.SUCCESS and error is not None:
            raise ValueError("success status cannot carry an error")
        if error is not None and not isinstance(error, (CallError, BaseException)):
            raise TypeError(f"error must be a CallError or an exception, got {type(error).__name__}")

        if execution_time < self.config.threshold:
            return None

        if isinstance(error, BaseException):
            error = CallError.from_exception(error)

        # Timestamp under the lock so timestamp order matches snapshot order.
        with self._lock:
            record = CallRecord(
                qualified_name=f"{self.label}#{operation_name}",
                execution_time=execution_time,
                status=status,
                timestamp=datetime.now(timezone.utc),
                error=error,
            )
            self._calls.append(record)

        if self.config.auto_output:
            self._output_call(record)
        return record

    def fetch_results(self) -> ResultSnapshot:
        """Return totals and records from a consistent copy of the store."""

        with self._lock:
            snapshot = tuple(self._calls)
        return ResultSnapshot.from_calls(snapshot)

    # ------------------------------------------------------------------
    def _output_call(self, record: CallRecord) -> None:
        level = logging.ERROR if record.status is CallStatus.ERROR else logging.INFO
        self._sink(level, format_call(record), record)


__all__ = ["ResultRecorder", "Sink", "format_call", "format_duration"]
