"""Module: bulkrename.config.naming

Author: Michael Economou
Date: 2026-01-01

Naming configuration: character presets, operation defaults, filename validation.
"""

# =====================================
# CHARACTER PRESETS
# =====================================

SYMBOL_CHARACTERS = "`~!@#$%^&*()_+-=[]{}\\|;:'\",<.>/?"
NUMBER_CHARACTERS = "1234567890"

# =====================================
# OPERATION DEFAULTS
# =====================================

ENUMERATE_DEFAULT_START = 0
ENUMERATE_DEFAULT_INCREMENT = 1
ENUMERATE_DEFAULT_PADDING = 0

# =====================================
# FILENAME VALIDATION
# =====================================

# Invalid filename characters (Windows-safe names)
INVALID_FILENAME_CHARS = '<>:"/\\|?*'

# Characters that shouldn't be at the end of a name
INVALID_TRAILING_CHARS = " ."

WINDOWS_RESERVED_NAMES = frozenset(
    {"CON", "PRN", "AUX", "NUL"}
    | {f"COM{i}" for i in range(1, 10)}
    | {f"LPT{i}" for i in range(1, 10)}
)
