"""Exceptions raised by the tracer itself (never by traced code)."""

from __future__ import annotations


class TracerError(Exception):
    """Base class for tracer failures."""


class InstallError(TracerError):
    """The timing wrapper could not be installed on the target class."""

    def __init__(self, target: type, name: str, reason: str) -> None:
        super().__init__(f"Cannot trace {target.__name__}.{name}: {reason}")
        self.target = target
        self.name = name


__all__ = ["InstallError", "TracerError"]
