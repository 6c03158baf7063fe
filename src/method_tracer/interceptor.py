"""Install timing wrappers around methods of an existing class.

Each wrapped attribute keeps its name, descriptor kind (plain, static or class
method) and visibility: a name-mangled ``__private`` method is replaced under
its mangled attribute, so it stays unreachable by its plain name from outside
the class. The original callable is kept on the class under
``_method_tracer_original_<attr>``.

Nested traced calls on the same thread are passed straight through; only the
outermost call is timed. The flag that tracks this lives in a
``threading.local`` owned by the interceptor, so two tracers never suppress
each other.
"""

from __future__ import annotations

import functools
import logging
import threading
import time
from enum import Enum
from typing import Any, Callable, Set

from .errors import InstallError
from .models import CallError, CallStatus
from .recorder import ResultRecorder

LOGGER = logging.getLogger(__name__)

ALIAS_PREFIX = "_method_tracer_original_"
WRAPPED_MARKER = "_method_tracer_wrapped"


class Visibility(str, Enum):
    PUBLIC = "public"
    PROTECTED = "protected"
    PRIVATE = "private"


def mangled_name(target: type, name: str) -> str:
    """Return the attribute name Python stores ``name`` under on ``target``."""

    if not name.startswith("__") or name.endswith("__"):
        return name
    stripped = target.__name__.lstrip("_")
    if not stripped:
        return name
    return f"_{stripped}{name}"


def _lookup(target: type, attr: str) -> Any:
    for klass in target.__mro__:
        if attr in vars(klass):
            return vars(klass)[attr]
    return None


def _is_operation(raw: Any) -> bool:
    if raw is None or isinstance(raw, type):
        return False
    return isinstance(raw, (staticmethod, classmethod)) or callable(raw)


def method_visibility(target: type, name: str) -> Visibility | None:
    """Classify ``name`` on ``target``; ``None`` when no such method exists."""

    attr = mangled_name(target, name)
    if not _is_operation(_lookup(target, attr)):
        return None
    if attr != name:
        return Visibility.PRIVATE
    if name.startswith("__") and name.endswith("__"):
        return Visibility.PUBLIC
    if name.startswith("_"):
        return Visibility.PROTECTED
    return Visibility.PUBLIC


def is_wrapped(raw: Any) -> bool:
    func = getattr(raw, "__func__", raw)
    return bool(getattr(func, WRAPPED_MARKER, False))


class MethodInterceptor:
    """Wrap methods of one class and report every outermost call to a recorder."""

    def __init__(self, target: type, recorder: ResultRecorder) -> None:
        self.target = target
        self.recorder = recorder
        self._state = threading.local()
        self._wrapped: Set[str] = set()

    @property
    def wrapped(self) -> frozenset[str]:
        return frozenset(self._wrapped)

    def wrap_operation(self, name: str) -> bool:
        """Install the timing wrapper for ``name``.

        Returns ``False`` without touching the class when the method does not
        exist or is already wrapped. Raises ``InstallError`` when the class
        refuses the new attribute.

        A sink that fails while reporting a traced exception is logged and
        the traced exception is re-raised; on success sink failures propagate.
        """

        visibility = method_visibility(self.target, name)
        if visibility is None:
            LOGGER.debug("Skipping %s.%s: no such method", self.target.__name__, name)
            return False

        attr = mangled_name(self.target, name)
        if name in self._wrapped or is_wrapped(vars(self.target).get(attr)):
            LOGGER.debug("Skipping %s.%s: already wrapped", self.target.__name__, name)
            return False

        raw = _lookup(self.target, attr)
        if isinstance(raw, (staticmethod, classmethod)):
            installed = type(raw)(self._build_wrapper(raw.__func__, name))
        elif hasattr(raw, "__get__"):
            installed = self._build_wrapper(raw, name)
        else:
            # Callables without a descriptor protocol never bind to instances.
            installed = staticmethod(self._build_wrapper(raw, name))

        try:
            setattr(self.target, f"{ALIAS_PREFIX}{attr}", raw)
            setattr(self.target, attr, installed)
        except (AttributeError, TypeError) as exc:
            raise InstallError(self.target, name, str(exc)) from exc

        self._wrapped.add(name)
        LOGGER.debug("Wrapped %s %s.%s", visibility.value, self.target.__name__, name)
        return True

    # ------------------------------------------------------------------
    def _build_wrapper(self, func: Callable[..., Any], name: str) -> Callable[..., Any]:
        state = self._state
        recorder = self.recorder

        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            if getattr(state, "active", False):
                return func(*args, **kwargs)

            state.active = True
            try:
                start = time.perf_counter()
                try:
                    result = func(*args, **kwargs)
                except Exception as exc:
                    elapsed = time.perf_counter() - start
                    try:
                        recorder.record_call(name, elapsed, CallStatus.ERROR, CallError.from_exception(exc))
                    except Exception:
                        # The caller must still see the traced method's own exception.
                        LOGGER.exception("Failed to record error from %s.%s", self.target.__name__, name)
                    raise
                recorder.record_call(name, time.perf_counter() - start, CallStatus.SUCCESS)
                return result
            finally:
                state.active = False

        setattr(wrapper, WRAPPED_MARKER, True)
        return wrapper


__all__ = ["MethodInterceptor", "Visibility", "is_wrapped", "mangled_name", "method_visibility"]
