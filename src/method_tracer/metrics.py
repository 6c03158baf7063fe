"""Per-method count and total-time rollup over recorder snapshots."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable

from .models import CallStatus, ResultSnapshot


@dataclass
class MethodStats:
    count: int = 0
    errors: int = 0
    total: float = 0.0

    def record(self, value: float, failed: bool = False) -> None:
        self.count += 1
        self.total += value
        if failed:
            self.errors += 1

    def summary(self) -> Dict[str, float]:
        return {"count": self.count, "errors": self.errors, "total_ms": self.total * 1000.0}


def summarize(snapshots: Iterable[ResultSnapshot]) -> Dict[str, Dict[str, float]]:
    """Group recorded calls by qualified method name, in first-seen order."""

    stats: Dict[str, MethodStats] = {}
    for snapshot in snapshots:
        for call in snapshot.calls:
            entry = stats.setdefault(call.qualified_name, MethodStats())
            entry.record(call.execution_time, failed=call.status is CallStatus.ERROR)
    return {name: entry.summary() for name, entry in stats.items()}


__all__ = ["MethodStats", "summarize"]
