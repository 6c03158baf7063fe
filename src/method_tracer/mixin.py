"""Registration helpers: trace a list of methods in one call."""

from __future__ import annotations

from typing import Any

from .tracer import SimpleTracer


def trace_methods(target: type, *method_names: str, **options: Any) -> SimpleTracer:
    """Build one tracer for ``target`` and wrap every named method with it.

    Options are the ``TracerConfig`` fields (``threshold``, ``auto_output``)
    plus an optional ``sink``. Names that do not exist are skipped.
    """

    tracer = SimpleTracer(target, **options)
    for name in method_names:
        tracer.trace_method(name)
    return tracer


class TracedMixin:
    """Adds a ``trace_methods`` classmethod to subclasses.

    Example::

        class Worker(TracedMixin):
            def perform(self):
                ...

        tracer = Worker.trace_methods("perform", threshold=0.005, auto_output=True)
    """

    @classmethod
    def trace_methods(cls, *method_names: str, **options: Any) -> SimpleTracer:
        return trace_methods(cls, *method_names, **options)


__all__ = ["TracedMixin", "trace_methods"]
