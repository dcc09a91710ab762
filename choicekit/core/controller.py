"""Module: controller.py

Date: 2026-10-19

ChoiceController - selection state of a single or multiple choice prompt.

Holds the committed selection and the behavioral flags, and exposes the
mutation API the rendering layer calls in response to user gestures.
Every mutation that changes the selection emits `changed` once and then
calls the external on_changed sink once with the full new value.

Guarded requests (removing the last value of a non-clearable choice,
clearing it, toggling to the state it already has) are silent no-ops.
Nothing here raises for UI input; exceptions from listeners and sinks
are logged and swallowed so a render pass never breaks.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any, Generic, TypeVar

from choicekit import config
from choicekit.core.filter import FilterNotifier
from choicekit.core.single import single_on_changed, single_on_close_modal, single_value
from choicekit.utils.events import Observable, Signal
from choicekit.utils.logging import get_cached_logger

logger = get_cached_logger(__name__)

T = TypeVar("T")

ChangedCallback = Callable[[list], Any]
CloseModalCallback = Callable[[list | None], Any]
ToggleCallback = Callable[..., None]

# selected_many() result when some but not all candidates are selected
INDETERMINATE = None

_COPY_FIELDS = (
    "value",
    "on_changed",
    "on_close_modal",
    "filter",
    "multiple",
    "clearable",
    "confirmation",
    "title",
)


class ChoiceController(Observable, Generic[T]):
    """Controller of the selection value and how it behaves.

    Args:
        value: Initial selection. Duplicates are discarded.
        on_changed: Called with the full selection after every change.
        on_close_modal: Called when the modal should close, with the
            selection when confirmed or None when dismissed.
        filter: Optional filter whose notifications are forwarded and
            which is hidden whenever the modal closes.
        multiple: Multiple selection instead of single selection.
        clearable: Whether the selection may be emptied.
        confirmation: Whether a single selection waits for an explicit
            confirm instead of closing the modal right away.
        title: Primary text of the modal and trigger.

    """

    changed = Signal()

    def __init__(
        self,
        value: Iterable[T] = (),
        on_changed: ChangedCallback | None = None,
        on_close_modal: CloseModalCallback | None = None,
        filter: FilterNotifier | None = None,
        multiple: bool = config.DEFAULT_MULTIPLE,
        clearable: bool = config.DEFAULT_CLEARABLE,
        confirmation: bool = config.DEFAULT_CONFIRMATION,
        title: str | None = None,
    ) -> None:
        self._multiple = bool(multiple)
        self._clearable = bool(clearable)
        self._confirmation = bool(confirmation)
        self._title = title
        self._on_changed = on_changed
        self._on_close_modal = on_close_modal
        self._filter = filter
        self._disposed = False

        # Insertion-ordered set
        self._value: dict[T, None] = dict.fromkeys(value)
        if not self._multiple and len(self._value) > 1:
            logger.warning(
                "Single choice %r created with %d values, keeping the first",
                title,
                len(self._value),
            )
            self._value = dict.fromkeys([next(iter(self._value))])

        if filter is not None:
            filter.subscribe(self._forward_filter_change)

    @classmethod
    def for_single(
        cls,
        value: T | None = None,
        on_changed: Callable[[T | None], Any] | None = None,
        on_close_modal: Callable[[T | None], Any] | None = None,
        **kwargs: Any,
    ) -> ChoiceController[T]:
        """Create a single selection controller from a single optional value.

        on_changed and on_close_modal receive the selected value (or None)
        instead of a list.
        """
        return cls(
            value=single_value(value),
            on_changed=single_on_changed(on_changed),
            on_close_modal=single_on_close_modal(on_close_modal),
            multiple=False,
            **kwargs,
        )

    @classmethod
    def for_multiple(
        cls,
        value: Iterable[T] = (),
        on_changed: ChangedCallback | None = None,
        **kwargs: Any,
    ) -> ChoiceController[T]:
        """Create a multiple selection controller."""
        return cls(value=value, on_changed=on_changed, multiple=True, **kwargs)

    def copy_with(self, **overrides: Any) -> ChoiceController[T]:
        """Create a new controller seeded from this one with the given fields replaced.

        Accepted fields: value, on_changed, on_close_modal, filter,
        multiple, clearable, confirmation, title. This controller is
        left untouched.
        """
        unknown = sorted(set(overrides) - set(_COPY_FIELDS))
        if unknown:
            raise TypeError(f"copy_with() got unexpected field(s): {', '.join(unknown)}")

        fields: dict[str, Any] = {
            "value": self.value,
            "on_changed": self._on_changed,
            "on_close_modal": self._on_close_modal,
            "filter": self._filter,
            "multiple": self._multiple,
            "clearable": self._clearable,
            "confirmation": self._confirmation,
            "title": self._title,
        }
        fields.update(overrides)
        return type(self)(**fields)

    def __repr__(self) -> str:
        return (
            f"ChoiceController(value={self.value!r}, multiple={self._multiple}, "
            f"clearable={self._clearable}, confirmation={self._confirmation})"
        )

    def __contains__(self, item: object) -> bool:
        return item in self._value

    def __enter__(self) -> ChoiceController[T]:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.dispose()

    # =====================================
    # Configuration
    # =====================================

    @property
    def multiple(self) -> bool:
        return self._multiple

    @property
    def clearable(self) -> bool:
        return self._clearable

    @property
    def confirmation(self) -> bool:
        return self._confirmation

    @property
    def title(self) -> str | None:
        return self._title

    @property
    def filter(self) -> FilterNotifier | None:
        return self._filter

    @property
    def filterable(self) -> bool:
        """Whether a filter is attached."""
        return self._filter is not None

    # =====================================
    # Subscription
    # =====================================

    def subscribe(self, listener: Callable[[], Any]) -> None:
        """Register a listener called with no arguments after every change."""
        self.changed.connect(listener)

    def unsubscribe(self, listener: Callable[[], Any]) -> None:
        self.changed.disconnect(listener)

    def dispose(self) -> None:
        """Detach from the filter and drop every listener."""
        if self._disposed:
            return
        self._disposed = True
        if self._filter is not None:
            self._filter.unsubscribe(self._forward_filter_change)
        self.changed.disconnect()

    def _forward_filter_change(self) -> None:
        self.changed.emit()

    # =====================================
    # State Queries
    # =====================================

    @property
    def value(self) -> list[T]:
        """Selection as a list."""
        return list(self._value)

    @property
    def single(self) -> T | None:
        """First selected value, or None."""
        return next(iter(self._value), None)

    @property
    def length(self) -> int:
        return len(self._value)

    @property
    def is_empty(self) -> bool:
        return not self._value

    @property
    def is_not_empty(self) -> bool:
        return bool(self._value)

    def any(self, candidates: Iterable[T]) -> bool:
        """Whether at least one of the candidates is selected."""
        return any(candidate in self._value for candidate in candidates)

    def every(self, candidates: Iterable[T]) -> bool:
        """Whether all of the candidates are selected."""
        return all(candidate in self._value for candidate in candidates)

    def selected_many(self, candidates: Iterable[T]) -> bool | None:
        """Tri-state membership for select-all controls.

        True when every candidate is selected, None (indeterminate) when
        only some are, False when none are.
        """
        candidates = list(candidates)
        if self.every(candidates):
            return True
        if self.any(candidates):
            return INDETERMINATE
        return False

    def selected(self, item: T) -> bool:
        return item in self._value

    # =====================================
    # Mutations
    # =====================================

    def add(self, item: T) -> None:
        """Add item to the selection. A single choice swaps its value instead."""
        if item in self._value:
            return
        if not self._multiple:
            self._value.clear()
        self._value[item] = None
        self._notify()

    def remove(self, item: T) -> None:
        """Remove item from the selection unless it would empty a non-clearable choice."""
        if not self._clearable and len(self._value) == 1:
            logger.debug(
                "Remove of %r blocked: last value of a non-clearable choice",
                item,
                extra={"dev_only": True},
            )
            return
        if item not in self._value:
            return
        del self._value[item]
        self._notify()

    def remove_all(self, candidates: Iterable[T]) -> None:
        """Remove every candidate from the selection.

        Refused as a whole when the choice is not clearable and the
        candidates cover the entire current selection.
        """
        candidates = dict.fromkeys(candidates)
        if not self._clearable and all(item in candidates for item in self._value):
            logger.debug(
                "Remove of %d value(s) blocked: would empty a non-clearable choice",
                len(candidates),
                extra={"dev_only": True},
            )
            return

        removed = [item for item in candidates if item in self._value]
        if not removed:
            return
        for item in removed:
            del self._value[item]
        self._notify()

    def replace(self, candidates: Iterable[T]) -> None:
        """Replace the selection with the candidates. Always notifies."""
        values = dict.fromkeys(candidates)
        if not self._multiple and len(values) > 1:
            values = dict.fromkeys([next(iter(values))])
        self._value = values
        self._notify()

    def clear(self) -> None:
        """Empty the selection. No-op unless clearable."""
        if not self._clearable:
            logger.debug("Clear ignored: choice is not clearable", extra={"dev_only": True})
            return
        self._value.clear()
        self._notify()

    def select(self, item: T, active: bool | None = None) -> None:
        """Toggle item, or set it to the given state.

        A single choice without confirmation asks the modal to close
        right after the toggle.
        """
        if active is None:
            active = not self.selected(item)

        if active:
            if self._multiple:
                self.add(item)
            else:
                self.replace([item])
        else:
            self.remove(item)

        if not self._confirmation and not self._multiple:
            self.close_modal(confirmed=True)

    def select_many(self, candidates: Iterable[T], active: bool | None = None) -> None:
        """Select exactly the candidates when active, otherwise deselect them.

        An unspecified state deselects.
        """
        if active:
            self.replace(candidates)
        else:
            self.remove_all(candidates)

    def on_selected(
        self, item: T, on_changed: ChangedCallback | None = None
    ) -> ToggleCallback:
        """Create a handler for a binary toggle control bound to item.

        The handler ignores requests for the state the item already has.
        """

        def handler(active: bool | None = None) -> None:
            if self.selected(item) == active:
                return
            self.select(item, active)
            self._invoke(on_changed, self.value)

        return handler

    def on_selected_many(
        self, candidates: Iterable[T], on_changed: ChangedCallback | None = None
    ) -> ToggleCallback:
        """Create a handler for a select-all control bound to candidates.

        Unlike on_selected() there is no guard against repeating the
        current state: every call goes through select_many().
        """
        candidates = list(candidates)

        def handler(active: bool | None = None) -> None:
            self.select_many(candidates, active)
            self._invoke(on_changed, self.value)

        return handler

    def close_modal(
        self, confirmed: bool = True, on_closed: Callable[[], Any] | None = None
    ) -> None:
        """Hide the filter and report the modal as closed.

        on_close_modal receives the selection when confirmed, else None.
        """
        if self._filter is not None:
            self._invoke(self._filter.hide)
        self._invoke(self._on_close_modal, self.value if confirmed else None)
        self._invoke(on_closed)

    # =====================================
    # Notification
    # =====================================

    def _notify(self) -> None:
        self.changed.emit()
        self._invoke(self._on_changed, self.value)

    def _invoke(self, callback: Callable[..., Any] | None, *args: Any) -> None:
        if callback is None:
            return
        try:
            callback(*args)
        except Exception:
            logger.exception(
                "Error in choice callback: %s",
                getattr(callback, "__qualname__", None) or repr(callback),
            )
