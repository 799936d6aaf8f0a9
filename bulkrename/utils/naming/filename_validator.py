"""Module: filename_validator.py

Author: Michael Economou
Date: 2025-05-06

Functions for validating and cleaning names according to Windows filename
rules, used to check rename previews before a host commits them.
Contains:
- validate_filename_part: Validate a name and return a cleaned version
- get_validation_error_message: Human-readable reason a name is invalid
"""

from bulkrename.config import (
    INVALID_FILENAME_CHARS,
    INVALID_TRAILING_CHARS,
    WINDOWS_RESERVED_NAMES,
)
from bulkrename.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)


def clean_trailing_chars(filename_part: str) -> str:
    """Remove trailing characters that are not allowed at the end of filenames."""
    return filename_part.rstrip(INVALID_TRAILING_CHARS)


def validate_filename_part(filename_part: str) -> tuple[bool, str]:
    """Validate a filename part and return validation status and clean version.

    Args:
        filename_part: The name to validate

    Returns:
        tuple[bool, str]: (is_valid, cleaned_filename_part). The cleaned part
        is empty when the name is invalid.

    """
    if not filename_part:
        return False, ""

    if any(char in INVALID_FILENAME_CHARS for char in filename_part):
        logger.debug(
            "[FilenameValidator] Invalid characters found in: '%s'",
            filename_part,
            extra={"dev_only": True},
        )
        return False, ""

    if filename_part != clean_trailing_chars(filename_part):
        return False, ""

    if not filename_part.strip():
        return False, ""

    if filename_part.upper() in WINDOWS_RESERVED_NAMES:
        logger.debug(
            "[FilenameValidator] Reserved Windows name: '%s'",
            filename_part,
            extra={"dev_only": True},
        )
        return False, ""

    return True, filename_part


def get_validation_error_message(filename_part: str) -> str:
    """Get a user-friendly error message for an invalid filename.

    Returns an empty string when the name is valid.
    """
    if not filename_part:
        return "Filename cannot be empty"

    invalid_chars = sorted({char for char in filename_part if char in INVALID_FILENAME_CHARS})
    if invalid_chars:
        char_list = "', '".join(invalid_chars)
        return f"Invalid characters: '{char_list}'"

    if not filename_part.strip():
        return "Filename cannot be only whitespace"

    if filename_part != clean_trailing_chars(filename_part):
        return "Filename cannot end with spaces or dots"

    if filename_part.upper() in WINDOWS_RESERVED_NAMES:
        return f"'{filename_part}' is a reserved Windows filename"

    return ""
