"""Selective method tracing: time chosen methods of a class and keep the results."""

from .config import TracerConfig, get_settings
from .errors import InstallError, TracerError
from .logging_utils import LoggingSink, configure_logging
from .mixin import TracedMixin, trace_methods
from .models import CallError, CallRecord, CallStatus, ResultSnapshot
from .recorder import ResultRecorder, format_duration
from .tracer import SimpleTracer

__version__ = "0.1.0"

__all__ = [
    "CallError",
    "CallRecord",
    "CallStatus",
    "InstallError",
    "LoggingSink",
    "ResultRecorder",
    "ResultSnapshot",
    "SimpleTracer",
    "TracedMixin",
    "TracerConfig",
    "TracerError",
    "configure_logging",
    "format_duration",
    "get_settings",
    "trace_methods",
]
