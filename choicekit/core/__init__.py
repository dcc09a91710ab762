"""Selection core: the choice controller, its filter collaborator and single-value adapters."""

from choicekit.core.controller import INDETERMINATE, ChoiceController
from choicekit.core.filter import FilterController, FilterNotifier
from choicekit.core.single import single_on_changed, single_on_close_modal, single_value

__all__ = [
    "INDETERMINATE",
    "ChoiceController",
    "FilterController",
    "FilterNotifier",
    "single_on_changed",
    "single_on_close_modal",
    "single_value",
]
