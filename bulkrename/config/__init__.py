"""Module: bulkrename.config

Author: Michael Economou
Date: 2026-01-01

Configuration package for bulkrename.

This package organizes configuration into logical modules:
- app: Package info, logging settings, preset storage
- naming: Filename validation and operation defaults

All settings are re-exported from this module:
    from bulkrename.config import APP_NAME, SYMBOL_CHARACTERS
"""

from bulkrename.config.app import *  # noqa: F401, F403
from bulkrename.config.naming import *  # noqa: F401, F403
