"""Module: bulkrename.config.app

Author: Michael Economou
Date: 2026-01-01

Package-level configuration: package info, logging settings, preset storage.
"""

# =====================================
# PACKAGE INFORMATION
# =====================================

APP_NAME = "bulkrename"
APP_VERSION = "1.0"

# =====================================
# LOGGING CONFIGURATION
# =====================================

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
LOG_DIR = "logs"

# Console logging
LOG_TO_CONSOLE = True
LOG_CONSOLE_LEVEL = "INFO"

# File logging
LOG_TO_FILE = True
LOG_FILE_LEVEL = "ERROR"
LOG_FILE_MAX_BYTES = 10_000_000  # 10MB per file
LOG_FILE_BACKUP_COUNT = 5

# Debug file logging
LOG_DEBUG_FILE_ENABLED = False
LOG_DEBUG_FILE_MAX_BYTES = 20_000_000  # 20MB per debug file
LOG_DEBUG_FILE_BACKUP_COUNT = 3

# Records logged with extra={"dev_only": True} stay out of the console
SHOW_DEV_ONLY_IN_CONSOLE = False

# =====================================
# PRESET STORAGE
# =====================================

PRESETS_DIR_ENV_VAR = "BULKRENAME_CONFIG_DIR"
PRESETS_DEFAULT_DIR_NAME = ".bulkrename"
PRESETS_FILE_NAME = "presets.json"
PRESETS_BACKUP_SUFFIX = ".bak"
