"""choicekit: headless selection state for single and multiple choice prompts."""

from choicekit.config import APP_VERSION as __version__
from choicekit.core import (
    INDETERMINATE,
    ChoiceController,
    FilterController,
    FilterNotifier,
    single_on_changed,
    single_on_close_modal,
    single_value,
)

__all__ = [
    "__version__",
    "INDETERMINATE",
    "ChoiceController",
    "FilterController",
    "FilterNotifier",
    "single_on_changed",
    "single_on_close_modal",
    "single_value",
]
