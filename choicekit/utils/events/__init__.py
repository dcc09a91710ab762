"""Module: __init__.py

Date: 2026-10-19

Event System.

Pure Python event/signal implementation for decoupling observers from state changes.
"""

from choicekit.utils.events.observable import Observable, Signal, SignalInstance

__all__ = ["Observable", "Signal", "SignalInstance"]
