"""Module: config.py

Date: 2026-10-19

Global configuration constants for choicekit.

Contains:
- Package information
- Logging settings (console, rotating file, dev-only records)
- Default behavioral flags for new choice controllers
"""

# =====================================
# PACKAGE INFORMATION
# =====================================

APP_NAME = "choicekit"
APP_VERSION = "0.1.0"

# =====================================
# LOGGING CONFIGURATION
# =====================================

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
LOG_CONSOLE_FORMAT = "[%(levelname)s] %(message)s"

# Console logging
LOG_TO_CONSOLE = True  # Enable/disable console output
LOG_CONSOLE_LEVEL = "INFO"  # Console log level (INFO, DEBUG, WARNING, ERROR)

# File logging
LOG_TO_FILE = False  # Host applications opt in
LOG_FILE_LEVEL = "INFO"
LOG_FILE_MAX_BYTES = 1_000_000  # 1MB per file (rotation trigger)
LOG_FILE_BACKUP_COUNT = 3

# Development logging settings
SHOW_DEV_ONLY_IN_CONSOLE = False  # Show dev-only logs in console

# =====================================
# CHOICE CONTROLLER DEFAULTS
# =====================================

DEFAULT_MULTIPLE = False  # Single selection unless asked otherwise
DEFAULT_CLEARABLE = False  # Selection may not be emptied by removal
DEFAULT_CONFIRMATION = False  # Single selection closes the modal immediately
