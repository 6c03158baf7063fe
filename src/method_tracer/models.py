"""Dataclasses shared by the recorder, the tracer facade and the HTTP layer."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Dict, Tuple


class CallStatus(str, Enum):
    SUCCESS = "success"
    ERROR = "error"


@dataclass(frozen=True, slots=True)
class CallError:
    """Class name and message of an exception raised by a traced call."""

    type_name: str
    message: str

    @classmethod
    def from_exception(cls, exc: BaseException) -> "CallError":
        return cls(type_name=type(exc).__name__, message=str(exc))

    def __str__(self) -> str:
        return f"{self.type_name}: {self.message}"


@dataclass(frozen=True, slots=True)
class CallRecord:
    """One completed invocation that met the recording threshold."""

    qualified_name: str
    execution_time: float
    status: CallStatus
    timestamp: datetime
    error: CallError | None = field(default=None)

    def as_dict(self) -> Dict[str, object]:
        """Serialize the record into a JSON-friendly payload."""

        return {
            "method_name": self.qualified_name,
            "execution_time": self.execution_time,
            "status": self.status.value,
            "error": (
                {"type": self.error.type_name, "message": self.error.message}
                if self.error is not None
                else None
            ),
            "timestamp": self.timestamp.isoformat(),
        }


@dataclass(frozen=True, slots=True)
class ResultSnapshot:
    """Point-in-time view of everything a recorder has stored."""

    total_calls: int
    total_time: float
    calls: Tuple[CallRecord, ...]

    @classmethod
    def from_calls(cls, calls: Tuple[CallRecord, ...]) -> "ResultSnapshot":
        return cls(
            total_calls=len(calls),
            total_time=sum(call.execution_time for call in calls),
            calls=calls,
        )

    def as_dict(self) -> Dict[str, object]:
        return {
            "total_calls": self.total_calls,
            "total_time": self.total_time,
            "calls": [call.as_dict() for call in self.calls],
        }


__all__ = ["CallError", "CallRecord", "CallStatus", "ResultSnapshot"]
