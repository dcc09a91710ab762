"""Module: observable.py

Date: 2026-10-19

Observable - Pure Python Observer pattern implementation.

Provides signal-style notifications without a UI framework:
- Signal descriptor for declaring events on a class
- SignalInstance holding the per-object listener list
- Observable base class for state holders
- Connect/disconnect/emit interface

Delivery is synchronous and depth-first. A listener that emits again
while being notified runs the nested emission to completion before the
outer emission moves on to the next listener.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from choicekit.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)

__all__ = ["Observable", "Signal", "SignalInstance"]


def _callback_name(callback: Callable[..., Any]) -> str:
    return getattr(callback, "__qualname__", None) or repr(callback)


class Signal:
    """Descriptor for defining observable signals.

    Usage:
        class Picker(Observable):
            changed = Signal()  # Signal with no arguments
            closed = Signal(list)  # Signal with a list argument

        picker = Picker()
        picker.changed.connect(callback)
        picker.changed.emit()
    """

    def __init__(self, *arg_types: type):
        """Initialize signal with expected argument types.

        Args:
            *arg_types: Type hints for signal arguments (for documentation only)

        """
        self.arg_types = arg_types
        self.name = ""  # Set by __set_name__

    def __set_name__(self, owner: type, name: str) -> None:
        self.name = name

    def __get__(self, obj: Any, _objtype: type | None = None) -> SignalInstance:
        if obj is None:
            return self  # type: ignore[return-value]

        attr_name = f"_signal_{self.name}"
        instance = obj.__dict__.get(attr_name)
        if instance is None:
            instance = SignalInstance(self.name, self.arg_types)
            obj.__dict__[attr_name] = instance
        return instance


class SignalInstance:
    """Instance of a signal for a specific object."""

    def __init__(self, name: str, arg_types: tuple[type, ...] = ()):
        self.name = name
        self.arg_types = arg_types
        self._callbacks: list[Callable[..., Any]] = []

    @property
    def receivers(self) -> int:
        """Number of connected callbacks."""
        return len(self._callbacks)

    def __len__(self) -> int:
        return len(self._callbacks)

    def is_connected(self, callback: Callable[..., Any]) -> bool:
        return callback in self._callbacks

    def connect(self, callback: Callable[..., Any]) -> None:
        """Connect callback to signal. Connecting the same callback twice is a no-op."""
        if callback in self._callbacks:
            return
        self._callbacks.append(callback)
        logger.debug(
            "Signal connected: %s -> %s",
            self.name,
            _callback_name(callback),
            extra={"dev_only": True},
        )

    def disconnect(self, callback: Callable[..., Any] | None = None) -> None:
        """Disconnect callback from signal.

        Args:
            callback: Callback to remove. If None, removes all callbacks.

        """
        if callback is None:
            count = len(self._callbacks)
            self._callbacks.clear()
            logger.debug(
                "All callbacks disconnected from %s (count: %d)",
                self.name,
                count,
                extra={"dev_only": True},
            )
        elif callback in self._callbacks:
            self._callbacks.remove(callback)
            logger.debug(
                "Signal disconnected: %s -> %s",
                self.name,
                _callback_name(callback),
                extra={"dev_only": True},
            )

    def emit(self, *args: Any) -> None:
        """Emit signal with arguments.

        Args:
            *args: Arguments to pass to connected callbacks

        """
        # Snapshot so listeners may connect/disconnect during delivery
        for callback in list(self._callbacks):
            try:
                callback(*args)
            except Exception:
                logger.exception(
                    "Error in signal callback: %s -> %s", self.name, _callback_name(callback)
                )


class Observable:
    """Base class for objects with observable signals.

    Use the Signal descriptor to define events:

        class Counter(Observable):
            value_changed = Signal(int)

            def increment(self):
                self._value += 1
                self.value_changed.emit(self._value)
    """
