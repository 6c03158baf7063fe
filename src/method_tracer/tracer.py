"""SimpleTracer: a recorder and an interceptor bound to one target class.

Usage::

    tracer = SimpleTracer(MyClass, threshold=0.005)
    tracer.trace_method("expensive_call")
    results = tracer.fetch_results()
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from .config import TracerConfig
from .interceptor import MethodInterceptor
from .logging_utils import log_event
from .models import CallError, CallRecord, CallStatus, ResultSnapshot
from .recorder import ResultRecorder, Sink


class SimpleTracer:
    """Time selected methods of ``target_class`` and keep the results in memory."""

    def __init__(
        self,
        target_class: type,
        config: TracerConfig | None = None,
        *,
        sink: Optional[Sink] = None,
        **options: Any,
    ) -> None:
        if not isinstance(target_class, type):
            raise TypeError(f"target_class must be a class, got {type(target_class).__name__}")
        if config is not None and options:
            raise ValueError("Pass either a TracerConfig or keyword options, not both")

        self.target_class = target_class
        self.config = config or TracerConfig.from_options(**options)
        self._recorder = ResultRecorder(target_class.__name__, self.config, sink=sink)
        self._interceptor = MethodInterceptor(target_class, self._recorder)

    @property
    def label(self) -> str:
        return self._recorder.label

    @property
    def traced_methods(self) -> frozenset[str]:
        return self._interceptor.wrapped

    def trace_method(self, name: str) -> bool:
        wrapped = self._interceptor.wrap_operation(name)
        if wrapped:
            log_event(
                "method_wrapped",
                {"target": self.label, "method": name, "threshold": self.config.threshold},
                level=logging.DEBUG,
            )
        return wrapped

    def record_call(
        self,
        method_name: str,
        execution_time: float,
        status: CallStatus | str,
        error: CallError | BaseException | None = None,
    ) -> CallRecord | None:
        return self._recorder.record_call(method_name, execution_time, status, error)

    def fetch_results(self) -> ResultSnapshot:
        return self._recorder.fetch_results()

    def __repr__(self) -> str:
        return f"SimpleTracer({self.label}, methods={sorted(self.traced_methods)})"


__all__ = ["SimpleTracer"]
