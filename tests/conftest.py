"""
Module: conftest.py

Date: 2026-10-19

Global pytest configuration and fixtures for the choicekit test suite.
"""

import os
import sys
from unittest.mock import Mock

# Add project root to sys.path so 'choicekit' imports without installation
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

import pytest

from choicekit import ChoiceController, FilterController
from choicekit.utils.logging import LoggerFactory


class StubFilter:
    """Minimal FilterNotifier: records hide() calls and lets tests fire notifications."""

    def __init__(self):
        self.listeners = []
        self.hide_calls = 0

    def subscribe(self, listener):
        self.listeners.append(listener)

    def unsubscribe(self, listener):
        if listener in self.listeners:
            self.listeners.remove(listener)

    def hide(self):
        self.hide_calls += 1

    def fire(self):
        for listener in list(self.listeners):
            listener()


@pytest.fixture(autouse=True)
def reset_logger_cache():
    """Keep global logger levels from leaking between tests."""
    yield
    LoggerFactory.set_global_level(0)
    LoggerFactory.clear_cache()


@pytest.fixture
def on_changed():
    return Mock(name="on_changed")


@pytest.fixture
def on_close_modal():
    return Mock(name="on_close_modal")


@pytest.fixture
def listener():
    return Mock(name="listener")


@pytest.fixture
def stub_filter():
    return StubFilter()


@pytest.fixture
def filter_controller():
    return FilterController()


@pytest.fixture
def make_controller(on_changed, on_close_modal, listener):
    """Factory building a controller wired to the shared mocks."""
    created = []

    def factory(value=(), **kwargs):
        kwargs.setdefault("on_changed", on_changed)
        kwargs.setdefault("on_close_modal", on_close_modal)
        controller = ChoiceController(value, **kwargs)
        controller.subscribe(listener)
        created.append(controller)
        return controller

    yield factory

    for controller in created:
        controller.dispose()
