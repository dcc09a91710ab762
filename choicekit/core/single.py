"""Module: single.py

Date: 2026-10-19

Adapters between single-value call sites and the list-based
ChoiceController: a value of T | None becomes a list of at most one
element, and callbacks taking T | None are wrapped into list callbacks.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any, TypeVar

T = TypeVar("T")


def single_value(value: T | None) -> list[T]:
    """Wrap an optional value into a selection list."""
    return [] if value is None else [value]


def first_or_none(values: Sequence[T] | None) -> T | None:
    if not values:
        return None
    return values[0]


def single_on_changed(
    callback: Callable[[T | None], Any] | None,
) -> Callable[[list[T]], None] | None:
    """Wrap a single-value change callback into a list callback.

    The wrapped callback receives the first selected value, or None when
    the selection is empty.
    """
    if callback is None:
        return None

    def on_changed(values: list[T]) -> None:
        callback(first_or_none(values))

    return on_changed


def single_on_close_modal(
    callback: Callable[[T | None], Any] | None,
) -> Callable[[list[T] | None], None] | None:
    """Wrap a single-value close-modal callback.

    A dismissed modal (None) and a confirmed empty selection both reach
    the callback as None.
    """
    if callback is None:
        return None

    def on_close_modal(values: list[T] | None) -> None:
        callback(first_or_none(values))

    return on_close_modal
