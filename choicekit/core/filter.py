"""Module: filter.py

Date: 2026-10-19

Filter collaborator for choice controllers.

FilterNotifier is the capability a ChoiceController depends on: a change
stream it can subscribe to and a hide() call it makes when the modal
closes. FilterController is the stock implementation holding the filter
text and whether the filter input is displayed. Matching items against
the text is left to the rendering layer.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol, runtime_checkable

from choicekit.utils.events import Observable, Signal
from choicekit.utils.logging import get_cached_logger

logger = get_cached_logger(__name__)

Listener = Callable[[], object]


@runtime_checkable
class FilterNotifier(Protocol):
    """What a ChoiceController needs from a filter."""

    def subscribe(self, listener: Listener) -> None: ...

    def unsubscribe(self, listener: Listener) -> None: ...

    def hide(self) -> None: ...


class FilterController(Observable):
    """Free-text filter state: the current text and its visibility."""

    changed = Signal()

    def __init__(self, value: str = "", displayed: bool = False) -> None:
        self._value = value
        self._displayed = displayed

    def __repr__(self) -> str:
        return f"FilterController(value={self._value!r}, displayed={self._displayed})"

    @property
    def value(self) -> str:
        """Current filter text."""
        return self._value

    @property
    def displayed(self) -> bool:
        """Whether the filter input is shown."""
        return self._displayed

    @property
    def is_active(self) -> bool:
        """Displayed and holding some text."""
        return self._displayed and bool(self._value)

    # =====================================
    # Subscription
    # =====================================

    def subscribe(self, listener: Listener) -> None:
        self.changed.connect(listener)

    def unsubscribe(self, listener: Listener) -> None:
        self.changed.disconnect(listener)

    def dispose(self) -> None:
        """Drop every subscriber."""
        self.changed.disconnect()

    # =====================================
    # Lifecycle
    # =====================================

    def show(self) -> None:
        if self._displayed:
            return
        self._displayed = True
        logger.debug("Filter shown", extra={"dev_only": True})
        self.changed.emit()

    def hide(self) -> None:
        """Hide the filter input and reset its text."""
        if not self._displayed and not self._value:
            return
        self._displayed = False
        self._value = ""
        logger.debug("Filter hidden", extra={"dev_only": True})
        self.changed.emit()

    def toggle(self) -> None:
        if self._displayed:
            self.hide()
        else:
            self.show()

    def apply(self, text: str) -> None:
        """Set the filter text."""
        if text == self._value:
            return
        self._value = text
        self.changed.emit()

    def clear(self) -> None:
        self.apply("")
